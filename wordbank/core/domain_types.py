"""Domain Types — the Record value shared by the codec and the list rules.

Invariants:
    - Record is immutable and always holds two str fields (never None)

Design Decisions:
    - frozen dataclass for Record: hashable, equality by value, cheap to build
      in a tight decode loop
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """One word/definition pair — the unit of import and export."""
    word: str = ""
    definition: str = ""

"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - The encoder accepts anything RecordLike: core Records and ORM rows alike

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Attributes typed as `object`: the encoder coerces None and non-text
      values itself, so callers need not pre-clean their rows
"""

from typing import Protocol


class RecordLike(Protocol):
    """Anything with a word and a definition — what the CSV encoder reads."""
    @property
    def word(self) -> object: ...
    @property
    def definition(self) -> object: ...

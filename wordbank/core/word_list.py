"""Word List Rules — pure ordering, quiz and import/export checks for the vocabulary list.

Invariants:
    - The list is ordered by position ascending
    - Added words go to the front: position one below the current lowest
    - Imported records keep file order: positions 0..n-1
    - An empty list can be neither exported nor quizzed
    - A decoded import with zero records is an invalid file, never an empty list

Design Decisions:
    - rng injected into random_index: deterministic tests, no global seeding
    - Checks raise domain errors instead of returning flags so routes stay thin
"""

import random
from datetime import date
from collections.abc import Sequence

from wordbank.core.domain_types import Record
from wordbank.core.errors import (
    ErrorContext, InvalidImportError, NoWordsError, NothingToExportError,
)


def new_entry_position(lowest: int | None) -> int:
    """Position for a newly added word; lowest is None for an empty list."""
    if lowest is None:
        return 0
    return lowest - 1


def import_positions(count: int) -> range:
    return range(count)


def random_index(count: int, rng: random.Random | None = None) -> int:
    """Uniform index into a list of `count` entries."""
    if count <= 0:
        raise NoWordsError()
    return (rng or random).randrange(count)


def require_exportable(count: int) -> None:
    if count <= 0:
        raise NothingToExportError(ErrorContext(record_count=0))


def require_imported(records: Sequence[Record]) -> Sequence[Record]:
    """Post-decode check: at least one record must have been recognised."""
    if not records:
        raise InvalidImportError()
    return records


def export_filename(prefix: str, day: date) -> str:
    """Download name for an export, e.g. my_words_2026-10-18.csv."""
    return f"{prefix}_{day.isoformat()}.csv"

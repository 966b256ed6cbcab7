"""Transfer Routes — CSV export and wholesale CSV import of the vocabulary list.

Invariants:
    - Export body is exactly encode_records(list order); media type text/csv
    - Export of an empty list is refused (NOTHING_TO_EXPORT)
    - Import body is the whole file text; it must be UTF-8 (a BOM is tolerated)
    - Import that decodes to zero records is refused (INVALID_FORMAT) and
      leaves the stored list untouched
    - A successful import replaces the list in one transaction, in file order,
      with fresh ids and timestamps

Design Decisions:
    - Raw request body over multipart upload: a CSV file is one text blob,
      any client can send it with Content-Type text/csv
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.config import get_settings
from wordbank.infrastructure.database import get_db
from wordbank.models.word import Word
from wordbank.schemas.word import ImportResult
from wordbank.api.routes.words import count_words, list_words
from wordbank.core.csv_codec import MEDIA_TYPE, decode_records, encode_records
from wordbank.core.errors import UnreadableFileError
from wordbank.core.word_list import (
    export_filename, import_positions, require_exportable, require_imported,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/words", tags=["transfer"])


@router.get("/export")
async def export_words(db: AsyncSession = Depends(get_db)):
    """Download the whole list as CSV."""
    words = await list_words(db)
    require_exportable(len(words))

    filename = export_filename(
        get_settings().export_filename_prefix,
        datetime.now(timezone.utc).date(),
    )
    logger.info("Words exported", extra={"record_count": len(words)})
    return Response(
        content=encode_records(words),
        media_type=MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
async def import_words(request: Request, db: AsyncSession = Depends(get_db)):
    """Replace the whole list with the records of an uploaded CSV file."""
    raw = await request.body()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnreadableFileError("content is not UTF-8 text") from e

    records = require_imported(decode_records(text))

    replaced = await count_words(db)
    await db.execute(delete(Word))
    db.add_all([
        Word(word=r.word, definition=r.definition, position=pos)
        for r, pos in zip(records, import_positions(len(records)))
    ])
    await db.commit()

    logger.info(
        f"Words imported, {replaced} existing replaced",
        extra={"record_count": len(records)},
    )
    return ImportResult(imported=len(records), replaced=replaced)

"""Word Routes — list, add, delete, and random quiz over the vocabulary list.

Invariants:
    - User input is validated by Pydantic before reaching the route handler
    - Listing order is position ascending (newest added first)
    - /random is declared before /{word_id} so it is never parsed as an id
    - A quiz card hides the definition; GET /{word_id} reveals it

Design Decisions:
    - get_word_or_404 and list_words exported for reuse by the transfer routes
    - Random pick done as count + offset: only one row is loaded per quiz
"""

import logging
import random
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wordbank.infrastructure.database import get_db
from wordbank.models.word import Word
from wordbank.schemas.word import (
    QuizCard, WordCreate, WordListResponse, WordResponse,
)
from wordbank.core.errors import NoWordsError, ResourceNotFoundError
from wordbank.core.word_list import new_entry_position, random_index

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/words", tags=["words"])

_rng = random.Random()


async def get_word_or_404(word_id: UUID, db: AsyncSession) -> Word:
    """Get word or raise 404."""
    result = await db.execute(select(Word).where(Word.id == word_id))
    word = result.scalar_one_or_none()
    if not word:
        raise ResourceNotFoundError("Word", str(word_id))
    return word


async def list_words(db: AsyncSession) -> list[Word]:
    """All words in list order."""
    result = await db.execute(
        select(Word).order_by(Word.position, Word.created_at.desc()),
    )
    return list(result.scalars().all())


async def count_words(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Word))
    return result.scalar_one()


@router.get("", response_model=WordListResponse)
async def get_words(db: AsyncSession = Depends(get_db)):
    """List all words."""
    words = await list_words(db)
    return WordListResponse(
        words=[WordResponse.model_validate(w) for w in words],
        count=len(words),
    )


@router.post(
    "", response_model=WordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_word(body: WordCreate, db: AsyncSession = Depends(get_db)):
    """Add a word to the front of the list."""
    result = await db.execute(select(func.min(Word.position)))
    word = Word(
        word=body.word,
        definition=body.definition,
        position=new_entry_position(result.scalar_one_or_none()),
    )
    db.add(word)
    await db.commit()
    await db.refresh(word)
    logger.info("Word added", extra={"word_id": str(word.id)})
    return WordResponse.model_validate(word)


@router.get("/random", response_model=QuizCard)
async def get_random_word(db: AsyncSession = Depends(get_db)):
    """Pick a random word; its definition stays hidden."""
    index = random_index(await count_words(db), _rng)
    result = await db.execute(
        select(Word)
        .order_by(Word.position, Word.created_at.desc())
        .offset(index)
        .limit(1),
    )
    word = result.scalar_one_or_none()
    if word is None:
        # deleted between the count and the pick
        raise NoWordsError()
    return QuizCard.model_validate(word)


@router.get("/{word_id}", response_model=WordResponse)
async def get_word(word_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get one word with its definition."""
    return WordResponse.model_validate(await get_word_or_404(word_id, db))


@router.delete("/{word_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_word(word_id: UUID, db: AsyncSession = Depends(get_db)):
    """Delete one word."""
    word = await get_word_or_404(word_id, db)
    await db.delete(word)
    await db.commit()
    logger.info("Word deleted", extra={"word_id": str(word_id)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)

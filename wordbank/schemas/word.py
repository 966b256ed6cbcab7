"""Word Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - WordCreate.word and WordCreate.definition are stripped and non-empty
    - QuizCard never carries the definition (revealed by a separate request)

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - from_attributes on responses: built straight from ORM rows
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WordCreate(BaseModel):
    """New entry — both fields required after trimming."""
    word: str = Field(min_length=1, max_length=500)
    definition: str = Field(min_length=1, max_length=5_000)

    @field_validator("word", "definition")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Word and Definition cannot be empty.")
        return v


class WordResponse(BaseModel):
    """Full entry, definition included."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    word: str
    definition: str
    created_at: datetime


class WordListResponse(BaseModel):
    words: list[WordResponse]
    count: int


class QuizCard(BaseModel):
    """Random word shown without its definition."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    word: str


class ImportResult(BaseModel):
    """Outcome of a wholesale import."""
    imported: int
    replaced: int

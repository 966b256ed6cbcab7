"""Word ORM — persists one vocabulary entry.

Invariants:
    - id is UUID primary key (client-side default)
    - word and definition are non-nullable text
    - position orders the list ascending; added words get the lowest value

Design Decisions:
    - Explicit position column over created_at ordering: an import stores a
      whole file in one transaction and must keep file order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from wordbank.db.base import Base


class Word(Base):
    """A word and its definition."""
    __tablename__ = "words"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    word: Mapped[str] = mapped_column(Text, nullable=False)
    definition: Mapped[str] = mapped_column(Text, nullable=False, default="")
    position: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

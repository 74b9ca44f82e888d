"""Comment ORM — a buyer's comment left on a seller's item.

Invariants:
    - id is UUID primary key (client-side default)
    - body, seller_ref, item_ref are non-nullable
    - created_at/updated_at are timezone-aware; updated_at refreshed on every UPDATE

Design Decisions:
    - seller_ref/item_ref stored as opaque strings: sellers and items live in
      another service, no foreign key to enforce here
    - created_at indexed: the only listing order is newest first
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from wordcase.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(Base):
    """Comment record exposed by the comments API."""
    __tablename__ = "comments"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    seller_ref: Mapped[str] = mapped_column(String(64), nullable=False)
    item_ref: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

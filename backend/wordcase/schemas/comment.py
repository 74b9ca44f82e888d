"""Comment Schemas — public JSON shape of comment records.

Invariants:
    - JSON keys are camelCase (sellerRef, createdAt); Python attributes stay snake_case
    - Built from ORM rows via from_attributes, never from raw dicts in routes

Design Decisions:
    - alias_generator is the core camel emitter: one source of truth for camelCase
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from wordcase.core.convert_case import to_camel_case


class CamelModel(BaseModel):
    """Base for response models serialized with camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel_case,
        populate_by_name=True,
        from_attributes=True,
    )


class CommentResponse(CamelModel):
    id: UUID
    body: str
    seller_ref: str
    item_ref: str
    created_at: datetime
    updated_at: datetime


class CommentDeleted(CamelModel):
    """Envelope returned by DELETE /comments/{id}."""
    message: str = "Comment deleted successfully"
    deleted_comment: CommentResponse

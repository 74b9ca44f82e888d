"""Comments — list and delete comment records.

Invariants:
    - GET returns every comment newest first (created_at desc); limit/offset optional
    - DELETE validates the id shape before touching the database
    - Malformed id → 400, unknown id → 404, deleted record echoed back on success
    - Database failures surface as DatabaseError (503); anything else as the
      generic 500 handler — internal details never reach the client

Design Decisions:
    - Routes talk to the ORM directly: two queries do not justify a repository layer
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wordcase.infrastructure.database import get_db
from wordcase.models.comment import Comment
from wordcase.schemas.comment import CommentDeleted, CommentResponse
from wordcase.core.domain_types import parse_comment_id
from wordcase.core.errors import InvalidIdentifierError, ResourceNotFoundError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    limit: int | None = Query(None, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List comments, newest first."""
    query = select(Comment).order_by(Comment.created_at.desc()).offset(offset)
    if limit is not None:
        query = query.limit(limit)
    result = await db.execute(query)
    comments = result.scalars().all()
    logger.info("Listed comments", extra={"count": len(comments)})
    return [CommentResponse.model_validate(c) for c in comments]


@router.delete("/{comment_id}", response_model=CommentDeleted)
async def delete_comment(
    comment_id: str, db: AsyncSession = Depends(get_db),
):
    """Delete a comment and return the deleted record."""
    parsed = parse_comment_id(comment_id)
    if parsed is None:
        raise InvalidIdentifierError("Comment", comment_id)

    comment = await db.get(Comment, parsed)
    if comment is None:
        raise ResourceNotFoundError("Comment", comment_id)

    deleted = CommentResponse.model_validate(comment)
    await db.delete(comment)
    await db.commit()
    logger.info("Comment deleted", extra={"comment_id": comment_id})
    return CommentDeleted(deleted_comment=deleted)

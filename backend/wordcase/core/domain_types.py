"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CommentId wraps UUID — never use a bare str id in domain logic
    - All valid casing styles encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CommentId = NewType("CommentId", UUID)


def parse_comment_id(raw: str) -> CommentId | None:
    """Return the CommentId for a well-formed identifier, None otherwise."""
    try:
        return CommentId(UUID(raw))
    except (ValueError, TypeError, AttributeError):
        return None


# ─── Enums ───────────────────────────────────────────────────────

class CasingPolicy(str, Enum):
    """Target casing conventions supported by the converter."""
    KEBAB = "kebab"
    CAMEL = "camel"
    DOT = "dot"

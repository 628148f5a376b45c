"""Domain value objects for TopMeUp."""

from topmeup.domain.value.identifiers import (
    CommentId,
    ListId,
    UserId,
)
from topmeup.domain.value.types import (
    Category,
    DisplayName,
    ListItem,
    PageCursor,
    parse_comment_id,
)

__all__ = [
    # Identifiers
    "UserId",
    "ListId",
    "CommentId",
    # Types
    "Category",
    "DisplayName",
    "ListItem",
    "PageCursor",
    "parse_comment_id",
]

"""Domain value objects for TopMeUp.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from topmeup.domain.value.common import RootValueObject, ValueObject
from topmeup.domain.value.identifiers import CommentId

_COMMENT_ID_PATTERN = re.compile(r"^[1-9][0-9]{0,18}$")

# Largest value of the BIGINT identity column.
MAX_COMMENT_ID = 2**63 - 1


def _is_comment_id(value: str) -> bool:
    return bool(_COMMENT_ID_PATTERN.match(value)) and int(value) <= MAX_COMMENT_ID


class Category(str, Enum):
    """Kind of content a top list ranks."""

    MOVIES = "movies"
    MUSIC = "music"
    GAMES = "games"


class DisplayName(RootValueObject[str]):
    """Public name shown next to a user's lists and comments."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Display name must be 1-100 characters")
        return v


class PageCursor(RootValueObject[str]):
    """Opaque pagination token for top-level comments.

    The token is the decimal ID of the last root comment on the previous
    page. The next page holds roots with an ID strictly lower than it.
    """

    @field_validator("root")
    @classmethod
    def validate_cursor_format(cls, v: str) -> str:
        """Validate the cursor is a well-formed comment ID."""
        if not _is_comment_id(v):
            raise ValueError("Cursor must be a comment ID")
        return v

    @classmethod
    def after(cls, comment_id: CommentId) -> "PageCursor":
        """Build the cursor pointing just past the given comment."""
        return cls(str(comment_id))

    @property
    def comment_id(self) -> CommentId:
        """Comment ID encoded in the cursor."""
        return CommentId(int(self.root))


class ListItem(ValueObject):
    """One ranked entry of a top list.

    Cached metadata is a snapshot of what the content provider returned
    when the item was added; it is never refreshed by this service.
    """

    external_id: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=200)
    position: int = Field(ge=1, le=10)
    category: Category
    poster_url: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=1900)
    artist: Optional[str] = None
    genres: tuple[str, ...] = ()
    rating: Optional[float] = Field(default=None, ge=0, le=10)
    description: Optional[str] = Field(default=None, max_length=1000)


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment ID received from a client.

    Args:
        value: Raw ID string

    Returns:
        Parsed comment ID

    Raises:
        ValueError: If the value is not a well-formed comment ID
    """
    if not _is_comment_id(value):
        raise ValueError(f"Invalid comment ID format: {value}")
    return CommentId(int(value))

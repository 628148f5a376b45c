"""Strongly typed identifiers for TopMeUp domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.

Comment IDs are integers allocated by the store in strictly increasing
order, so a comment ID doubles as a recency cursor. Everything else is a
UUID.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
ListId = NewType("ListId", UUID)
CommentId = NewType("CommentId", int)

"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .top_list import InMemoryTopListRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryTopListRepository",
    "InMemoryUserRepository",
]

"""Repository interfaces for TopMeUp domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from topmeup.domain.repository.comment import CommentRepository
from topmeup.domain.repository.top_list import ListSortOrder, TopListRepository
from topmeup.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ListSortOrder",
    "TopListRepository",
    "CommentRepository",
]

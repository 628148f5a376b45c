"""PostgreSQL repository implementations."""

from topmeup.persistence.repository.comment import PostgresCommentRepository
from topmeup.persistence.repository.top_list import PostgresTopListRepository
from topmeup.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresTopListRepository",
    "PostgresUserRepository",
]

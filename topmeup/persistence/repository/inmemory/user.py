"""In-memory user repository for testing."""

from collections.abc import Collection
from typing import Optional

from topmeup.domain.model.user import User
from topmeup.domain.repository.user import UserRepository
from topmeup.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Collection[UserId]) -> list[User]:
        """Find all users with the given IDs."""
        return [self._users[u] for u in set(user_ids) if u in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        return next(
            (u for u in self._users.values() if u.email.lower() == wanted), None
        )

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

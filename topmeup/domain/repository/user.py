"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import List, Optional

from topmeup.domain.model.user import User
from topmeup.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Collection[UserId]) -> List[User]:
        """Find all users with the given IDs in a single lookup.

        Unknown IDs are skipped silently.

        Args:
            user_ids: User IDs to look up

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address.

        Args:
            email: Email address, compared case-insensitively

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

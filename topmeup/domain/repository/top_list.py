"""Top list repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from topmeup.domain.model.top_list import TopList
from topmeup.domain.value import Category, ListId, UserId


class ListSortOrder(str, Enum):
    """Sort order for public list browsing, always descending."""

    CREATED_AT = "createdAt"
    VIEWS_COUNT = "viewsCount"
    LIKES_COUNT = "likesCount"
    COMMENTS_COUNT = "commentsCount"


class TopListRepository(ABC):
    """Repository for TopList aggregate."""

    @abstractmethod
    async def find_by_id(self, list_id: ListId) -> Optional[TopList]:
        """Find a list by ID.

        Args:
            list_id: The list's unique identifier

        Returns:
            The list if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(
        self,
        user_id: UserId,
        category: Optional[Category] = None,
        is_public: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[TopList]:
        """Find a user's lists, newest first.

        Args:
            user_id: Owner user ID
            category: Filter by category (None for all)
            is_public: Filter by visibility (None for both)
            limit: Maximum number of lists to return
            offset: Number of lists to skip

        Returns:
            Lists ordered by descending creation time
        """
        pass

    @abstractmethod
    async def count_by_owner(
        self,
        user_id: UserId,
        category: Optional[Category] = None,
        is_public: Optional[bool] = None,
    ) -> int:
        """Count a user's lists matching the given filters."""
        pass

    @abstractmethod
    async def find_public(
        self,
        category: Optional[Category] = None,
        sort: ListSortOrder = ListSortOrder.CREATED_AT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[TopList]:
        """Find public lists with filtering and pagination.

        Args:
            category: Filter by category (None for all)
            sort: Field to sort by, descending
            limit: Maximum number of lists to return
            offset: Number of lists to skip

        Returns:
            Public lists in the requested order
        """
        pass

    @abstractmethod
    async def count_public(self, category: Optional[Category] = None) -> int:
        """Count public lists, optionally within one category."""
        pass

    @abstractmethod
    async def save(self, top_list: TopList) -> TopList:
        """Save a list (create or update).

        Args:
            top_list: The list to save

        Returns:
            The saved list
        """
        pass

    @abstractmethod
    async def delete(self, list_id: ListId) -> None:
        """Delete a list (hard delete).

        Args:
            list_id: The list ID to delete
        """
        pass

    @abstractmethod
    async def adjust_comments_count(self, list_id: ListId, delta: int) -> None:
        """Atomically add delta to the list's comment counter (minimum 0).

        Args:
            list_id: The list ID
            delta: Amount to add (negative to subtract)
        """
        pass

    @abstractmethod
    async def increment_views(self, list_id: ListId) -> None:
        """Atomically increment the list's view counter by 1.

        Args:
            list_id: The list ID
        """
        pass

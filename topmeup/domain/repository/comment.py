"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import List, Optional

from topmeup.domain.model.comment import Comment
from topmeup.domain.value import CommentId, ListId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots(
        self,
        list_id: ListId,
        limit: int,
        before: Optional[CommentId] = None,
    ) -> List[Comment]:
        """Find top-level comments of a list, newest first.

        A top-level comment qualifies when it is not soft-deleted, or when
        it is soft-deleted but still has at least one reply.

        Args:
            list_id: The list ID
            limit: Maximum number of comments to return
            before: Only return comments with an ID strictly below this one

        Returns:
            Comments ordered by descending ID
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_ids: Collection[CommentId],
    ) -> List[Comment]:
        """Find direct replies of any of the given comments.

        Soft-deleted replies are included.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies ordered by ascending ID
        """
        pass

    @abstractmethod
    async def count_by_list(self, list_id: ListId) -> int:
        """Count every comment of a list, deleted or not, at any depth.

        Args:
            list_id: The list ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def delete_by_list(self, list_id: ListId) -> int:
        """Hard delete every comment of a list.

        Args:
            list_id: The list ID

        Returns:
            Number of comments removed
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        A comment without an ID is inserted and receives the next ID in
        allocation order. likes_count is recomputed from likes.

        Args:
            comment: The comment to save

        Returns:
            The saved comment (with its ID populated)
        """
        pass

"""Comment domain service."""

from datetime import datetime

import logfire

from topmeup.config import CommentSettings
from topmeup.domain.model.comment import Comment
from topmeup.domain.repository import CommentRepository
from topmeup.domain.value import CommentId, ListId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for single-comment operations.

    Every mutation rebuilds the immutable comment through validation so
    likes_count stays equal to the size of the likes set.
    """

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (deleted placeholder text)
        """
        self.comment_repository = comment_repository
        self.settings = settings

    @staticmethod
    def _rebuild(comment: Comment, **changes) -> Comment:
        return Comment.model_validate({**comment.model_dump(), **changes})

    async def create_comment(
        self,
        list_id: ListId,
        user_id: UserId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a list or reply to another comment.

        Args:
            list_id: List ID
            user_id: Author user ID
            content: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment with its allocated ID

        Raises:
            ValueError: If parent comment invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            list_id=str(list_id),
            user_id=str(user_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            if parent_comment_id is not None:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_comment_id=str(parent_comment_id),
                        list_id=str(list_id),
                    )
                    raise ValueError("Parent comment not found")
                if parent.list_id != list_id:
                    logfire.error(
                        "Parent comment does not belong to list",
                        parent_comment_id=str(parent_comment_id),
                        parent_list_id=str(parent.list_id),
                        target_list_id=str(list_id),
                    )
                    raise ValueError("Parent comment does not belong to this list")

            now = datetime.now()
            comment = Comment(
                list_id=list_id,
                user_id=user_id,
                content=content,
                parent_comment_id=parent_comment_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                list_id=str(list_id),
                is_reply=parent_comment_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def update_content(self, comment: Comment, content: str) -> Comment:
        """Replace a comment's content and mark it edited.

        Args:
            comment: Comment to edit
            content: New content

        Returns:
            Updated comment
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment.id),
            content_length=len(content),
        ):
            now = datetime.now()
            updated = await self.comment_repository.save(
                self._rebuild(
                    comment,
                    content=content,
                    is_edited=True,
                    edited_at=now,
                    updated_at=now,
                )
            )
            logfire.info("Comment content updated", comment_id=str(comment.id))
            return updated

    async def soft_delete(self, comment: Comment) -> Comment:
        """Mark a comment deleted and overwrite its content.

        Replies are left untouched and stay reachable in the thread.

        Args:
            comment: Comment to delete

        Returns:
            Deleted comment
        """
        with logfire.span("comment_service.soft_delete", comment_id=str(comment.id)):
            deleted = await self.comment_repository.save(
                self._rebuild(
                    comment,
                    is_deleted=True,
                    content=self.settings.deleted_placeholder,
                    updated_at=datetime.now(),
                )
            )
            logfire.info("Comment soft-deleted", comment_id=str(comment.id))
            return deleted

    async def delete_for_list(self, list_id: ListId) -> int:
        """Hard delete a list's whole discussion before the list itself goes.

        Args:
            list_id: List ID

        Returns:
            Number of comments removed
        """
        with logfire.span("comment_service.delete_for_list", list_id=str(list_id)):
            removed = await self.comment_repository.delete_by_list(list_id)
            logfire.info("List comments deleted", list_id=str(list_id), count=removed)
            return removed

    async def add_like(self, comment: Comment, user_id: UserId) -> Comment:
        """Add a user's like; liking twice is a no-op.

        Args:
            comment: Comment to like
            user_id: Liking user

        Returns:
            Comment with the like recorded
        """
        with logfire.span(
            "comment_service.add_like",
            comment_id=str(comment.id),
            user_id=str(user_id),
        ):
            if user_id in comment.likes:
                logfire.info("Comment already liked", comment_id=str(comment.id))
                return comment
            liked = await self.comment_repository.save(
                self._rebuild(comment, likes=comment.likes | {user_id})
            )
            logfire.info(
                "Comment liked",
                comment_id=str(comment.id),
                likes_count=liked.likes_count,
            )
            return liked

    async def remove_like(self, comment: Comment, user_id: UserId) -> Comment:
        """Remove a user's like; unliking without a like is a no-op.

        Args:
            comment: Comment to unlike
            user_id: User withdrawing the like

        Returns:
            Comment without the user's like
        """
        with logfire.span(
            "comment_service.remove_like",
            comment_id=str(comment.id),
            user_id=str(user_id),
        ):
            if user_id not in comment.likes:
                return comment
            unliked = await self.comment_repository.save(
                self._rebuild(comment, likes=comment.likes - {user_id})
            )
            logfire.info(
                "Comment unliked",
                comment_id=str(comment.id),
                likes_count=unliked.likes_count,
            )
            return unliked

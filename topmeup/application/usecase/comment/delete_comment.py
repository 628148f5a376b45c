"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.error import (
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.service import CommentService, TopListService
from topmeup.domain.value import UserId
from topmeup.domain.value.types import parse_comment_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(ResponseModel):
    """Delete comment response."""

    success: bool = True
    message: str = "Comment deleted"


class DeleteCommentUseCase:
    """Use case for soft-deleting one's own comment.

    The comment stays in the thread as a placeholder so its replies keep
    their anchor.
    """

    def __init__(
        self,
        comment_service: CommentService,
        top_list_service: TopListService,
    ) -> None:
        self.comment_service = comment_service
        self.top_list_service = top_list_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValidationError: If comment ID is malformed
            NotFoundError: If comment not found
            NotAuthorizedError: If user is not the author
            ContentDeletedException: If comment was already deleted
        """
        try:
            comment_id = parse_comment_id(request.comment_id)
        except ValueError as e:
            raise ValidationError(str(e))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", request.comment_id)
        if comment.user_id != UserId(UUID(request.user_id)):
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)
        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        await self.comment_service.soft_delete(comment)
        await self.top_list_service.adjust_comments_count(comment.list_id, -1)

        return DeleteCommentResponse()

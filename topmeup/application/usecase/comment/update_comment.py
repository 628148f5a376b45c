"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.error import (
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.service import CommentService
from topmeup.domain.value import UserId
from topmeup.domain.value.types import parse_comment_id

from .views import CommentView


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    content: str
    user_id: str  # User ID from authenticated user


class UpdateCommentResponse(ResponseModel):
    """Update comment response."""

    success: bool = True
    data: CommentView


class UpdateCommentUseCase:
    """Use case for editing the content of one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If comment ID is malformed
            NotFoundError: If comment not found
            NotAuthorizedError: If user is not the author
            ContentDeletedException: If comment was deleted
        """
        try:
            comment_id = parse_comment_id(request.comment_id)
        except ValueError as e:
            raise ValidationError(str(e))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", request.comment_id)

        user_id = UserId(UUID(request.user_id))
        if comment.user_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)
        if comment.is_deleted:
            raise ContentDeletedException("comment", request.comment_id)

        updated = await self.comment_service.update_content(
            comment, request.content.strip()
        )
        return UpdateCommentResponse(data=CommentView.from_domain(updated, user_id))

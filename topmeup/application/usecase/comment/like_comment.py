"""Like and unlike comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.model.comment import Comment
from topmeup.domain.service import CommentService
from topmeup.domain.value import UserId
from topmeup.domain.value.types import parse_comment_id


class LikeCommentRequest(BaseModel):
    """Like or unlike comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class LikeState(ResponseModel):
    """Like state of a comment for the requesting user."""

    likes_count: int
    user_has_liked: bool


class LikeCommentResponse(ResponseModel):
    """Like or unlike comment response."""

    success: bool = True
    data: LikeState


async def _load_comment(
    comment_service: CommentService, raw_comment_id: str
) -> Comment:
    try:
        comment_id = parse_comment_id(raw_comment_id)
    except ValueError as e:
        raise ValidationError(str(e))

    comment = await comment_service.get_comment_by_id(comment_id)
    if not comment:
        raise NotFoundError("Comment", raw_comment_id)
    return comment


class LikeCommentUseCase:
    """Use case for liking a comment. Liking twice changes nothing."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        Raises:
            ValidationError: If comment ID is malformed
            NotFoundError: If comment not found
            BusinessRuleViolationError: If comment was deleted
        """
        comment = await _load_comment(self.comment_service, request.comment_id)
        if comment.is_deleted:
            raise BusinessRuleViolationError("Cannot like a deleted comment")

        user_id = UserId(UUID(request.user_id))
        liked = await self.comment_service.add_like(comment, user_id)
        return LikeCommentResponse(
            data=LikeState(
                likes_count=liked.likes_count, user_has_liked=liked.liked_by(user_id)
            )
        )


class UnlikeCommentUseCase:
    """Use case for withdrawing a like. Unliking without a like changes nothing."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute unlike flow.

        Raises:
            ValidationError: If comment ID is malformed
            NotFoundError: If comment not found
        """
        comment = await _load_comment(self.comment_service, request.comment_id)

        user_id = UserId(UUID(request.user_id))
        unliked = await self.comment_service.remove_like(comment, user_id)
        return LikeCommentResponse(
            data=LikeState(
                likes_count=unliked.likes_count,
                user_has_liked=unliked.liked_by(user_id),
            )
        )

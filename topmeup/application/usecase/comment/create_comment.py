"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.error import NotFoundError, ValidationError
from topmeup.domain.service import CommentService, TopListService
from topmeup.domain.value import ListId, UserId
from topmeup.domain.value.types import parse_comment_id

from .views import CommentView


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    list_id: str  # UUID string
    content: str
    user_id: str  # User ID from authenticated user
    parent_comment_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(ResponseModel):
    """Create comment response."""

    success: bool = True
    data: CommentView


class CreateCommentUseCase:
    """Use case for commenting on a list or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        top_list_service: TopListService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            top_list_service: List domain service
        """
        self.comment_service = comment_service
        self.top_list_service = top_list_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify list exists via list service
        2. Create comment via comment service (validates parent if replying)
        3. Bump the list's comment counter (best effort)

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If list not found
            ValueError: If parent comment invalid or content out of bounds
        """
        try:
            list_id = ListId(UUID(request.list_id))
            parent_comment_id = (
                parse_comment_id(request.parent_comment_id)
                if request.parent_comment_id is not None
                else None
            )
        except ValueError as e:
            raise ValidationError(str(e))

        top_list = await self.top_list_service.get_list_by_id(list_id)
        if not top_list:
            raise NotFoundError("List", request.list_id)

        user_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.create_comment(
            list_id=list_id,
            user_id=user_id,
            content=request.content.strip(),
            parent_comment_id=parent_comment_id,
        )

        await self.top_list_service.adjust_comments_count(list_id, 1)

        return CreateCommentResponse(data=CommentView.from_domain(comment, user_id))

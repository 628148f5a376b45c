"""Get comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from topmeup.application.usecase.base import BaseUseCase, ResponseModel
from topmeup.domain.error import NotFoundError, ValidationError
from topmeup.domain.service import (
    CommentThreadService,
    JWTService,
    TopListService,
    UserService,
)
from topmeup.domain.value import ListId, PageCursor

from .views import CommentNodeView


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    list_id: str  # UUID string
    limit: int | None = None
    cursor: str | None = None
    auth_token: str | None = None  # JWT token for authentication (optional)


class PaginationView(ResponseModel):
    """Pagination block of a comment page."""

    limit: int
    total: int
    has_next: bool
    next_cursor: str | None


class GetCommentsResponse(ResponseModel):
    """Get comments response."""

    success: bool = True
    data: list[CommentNodeView]
    pagination: PaginationView


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading one page of a list's threaded comments."""

    def __init__(
        self,
        comment_thread_service: CommentThreadService,
        top_list_service: TopListService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_thread_service: Thread reading service
            top_list_service: List service for the existence check
            user_service: User service for author identities
            jwt_service: JWT service for decoding auth tokens
        """
        self.comment_thread_service = comment_thread_service
        self.top_list_service = top_list_service
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Validate list ID and cursor (before any store access)
        2. Verify list exists
        3. Fetch a page of root comments, newest first
        4. Load every reply below those roots
        5. Resolve author identities in one lookup
        6. Assemble the forest and count the list's comments

        Args:
            request: Get comments request

        Returns:
            Page of comment trees with pagination details

        Raises:
            ValidationError: If list ID or cursor is malformed
            NotFoundError: If list does not exist
        """
        try:
            list_id = ListId(UUID(request.list_id))
        except ValueError:
            raise ValidationError(f"Invalid list ID format: {request.list_id}")

        cursor = None
        if request.cursor is not None:
            try:
                cursor = PageCursor(request.cursor)
            except ValueError:
                raise ValidationError(f"Invalid cursor: {request.cursor}")

        top_list = await self.top_list_service.get_list_by_id(list_id)
        if not top_list:
            raise NotFoundError("List", request.list_id)

        limit = self.comment_thread_service.clamp_limit(request.limit)
        viewer_id = self.jwt_service.get_user_id_from_token(request.auth_token)

        page = await self.comment_thread_service.fetch_root_page(
            list_id=list_id, limit=limit, cursor=cursor
        )
        replies = await self.comment_thread_service.load_replies(
            [comment.id for comment in page.comments]
        )
        identities = await self.user_service.resolve_identities(
            [comment.user_id for comment in [*page.comments, *replies]]
        )

        forest = self.comment_thread_service.build_tree(
            roots=page.comments,
            replies=replies,
            identities=identities,
            viewer_id=viewer_id,
        )
        total = await self.comment_thread_service.count_comments(list_id)

        logfire.info(
            "Comment page served",
            list_id=request.list_id,
            roots=len(forest),
            replies=len(replies),
            total=total,
        )

        return GetCommentsResponse(
            data=[CommentNodeView.from_node(node) for node in forest],
            pagination=PaginationView(
                limit=limit,
                total=total,
                has_next=page.has_next,
                next_cursor=str(page.next_cursor) if page.next_cursor else None,
            ),
        )

"""Get list use case."""

from uuid import UUID

from pydantic import BaseModel

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.error import (
    AuthenticationRequiredError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.service import JWTService, TopListService
from topmeup.domain.value import ListId

from .views import TopListView


class GetListRequest(BaseModel):
    """Get list request."""

    list_id: str  # UUID string
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetListResponse(ResponseModel):
    """Get list response."""

    success: bool = True
    data: TopListView


class GetListUseCase:
    """Use case for reading a list and counting the view."""

    def __init__(
        self, top_list_service: TopListService, jwt_service: JWTService
    ) -> None:
        """Initialize get list use case.

        Args:
            top_list_service: List domain service
            jwt_service: JWT service for decoding auth tokens
        """
        self.top_list_service = top_list_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetListRequest) -> GetListResponse:
        """Execute get list flow.

        Private lists are only visible to their owner.

        Raises:
            ValidationError: If list ID is malformed
            NotFoundError: If list not found
            AuthenticationRequiredError: If list is private and viewer anonymous
            NotAuthorizedError: If list is private and owned by someone else
        """
        try:
            list_id = ListId(UUID(request.list_id))
        except ValueError:
            raise ValidationError(f"Invalid list ID format: {request.list_id}")

        top_list = await self.top_list_service.get_list_by_id(list_id)
        if not top_list:
            raise NotFoundError("List", request.list_id)

        if not top_list.is_public:
            viewer_id = self.jwt_service.get_user_id_from_token(request.auth_token)
            if viewer_id is None:
                raise AuthenticationRequiredError("list", request.list_id)
            if viewer_id != top_list.user_id:
                raise NotAuthorizedError("list", request.list_id, str(viewer_id))

        await self.top_list_service.record_view(list_id)
        top_list = top_list.model_copy(
            update={"views_count": top_list.views_count + 1}
        )

        return GetListResponse(data=TopListView.from_domain(top_list))

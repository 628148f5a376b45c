"""Create list use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from topmeup.application.usecase.base import BaseUseCase, ResponseModel
from topmeup.domain.service import TopListService, UserService
from topmeup.domain.value import Category, ListItem, UserId

from .views import TopListView


class CreateListRequest(BaseModel):
    """Create list request."""

    user_id: str  # User ID from authenticated user
    title: str
    category: Category
    description: str | None = None
    items: list[ListItem] = Field(default_factory=list)
    is_public: bool = False


class CreateListResponse(ResponseModel):
    """Create list response."""

    success: bool = True
    data: TopListView


class CreateListUseCase(BaseUseCase):
    """Use case for creating a top list."""

    def __init__(
        self, top_list_service: TopListService, user_service: UserService
    ) -> None:
        """Initialize create list use case.

        Args:
            top_list_service: List domain service
            user_service: User domain service, to check the owner is registered
        """
        self.top_list_service = top_list_service
        self.user_service = user_service

    async def execute(self, request: CreateListRequest) -> CreateListResponse:
        """Execute create list flow.

        Args:
            request: Create list request

        Returns:
            Created list

        Raises:
            NotFoundError: If the owner has not registered yet
            ValueError: If the list or its items violate list rules
        """
        owner = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        top_list = await self.top_list_service.create_list(
            user_id=owner.id,
            title=request.title.strip(),
            category=request.category,
            description=request.description,
            items=request.items,
            is_public=request.is_public,
        )
        return CreateListResponse(data=TopListView.from_domain(top_list))

"""Update list use case."""

from pydantic import BaseModel

from topmeup.application.usecase.base import BaseUseCase, ResponseModel
from topmeup.domain.service import TopListService
from topmeup.domain.value import ListItem

from .ownership import load_owned_list
from .views import TopListView


class UpdateListRequest(BaseModel):
    """Update list request.

    Fields left as None are not changed. Category cannot change since
    every item must match it.
    """

    list_id: str
    user_id: str  # User ID from authenticated user
    title: str | None = None
    description: str | None = None
    clear_description: bool = False  # Client sent description: null
    is_public: bool | None = None
    items: list[ListItem] | None = None


class UpdateListResponse(ResponseModel):
    """Response of every list edit."""

    success: bool = True
    message: str
    data: TopListView


class UpdateListUseCase(BaseUseCase):
    """Use case for editing one's own list."""

    def __init__(self, top_list_service: TopListService) -> None:
        self.top_list_service = top_list_service

    async def execute(self, request: UpdateListRequest) -> UpdateListResponse:
        """Execute update list flow.

        Raises:
            ValidationError: If list ID is malformed
            NotFoundError: If list not found
            NotAuthorizedError: If user does not own the list
            ValueError: If the edited list violates list rules
        """
        top_list = await load_owned_list(
            self.top_list_service, request.list_id, request.user_id
        )

        edited = top_list.with_details(
            title=request.title.strip() if request.title else None,
            description=request.description,
            is_public=request.is_public,
            items=request.items,
            clear_description=request.clear_description,
        )
        saved = await self.top_list_service.save_changes(edited)
        return UpdateListResponse(
            message="List updated successfully", data=TopListView.from_domain(saved)
        )

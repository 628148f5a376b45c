"""List item use cases: add, update, remove and reorder entries."""

from typing import Any

from pydantic import BaseModel, Field

from topmeup.application.usecase.base import BaseUseCase
from topmeup.domain.model import TopList
from topmeup.domain.service import TopListService
from topmeup.domain.value import ListItem

from .ownership import load_owned_list
from .update_list import UpdateListResponse
from .views import TopListView


class AddListItemRequest(BaseModel):
    list_id: str
    user_id: str
    item: ListItem


class UpdateListItemRequest(BaseModel):
    list_id: str
    user_id: str
    external_id: str
    position: int | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)  # Cached fields to overwrite


class RemoveListItemRequest(BaseModel):
    list_id: str
    user_id: str
    external_id: str


class ReorderListItemsRequest(BaseModel):
    list_id: str
    user_id: str
    positions: dict[str, int]  # external ID -> new position


# Cached fields a client may refresh on an existing entry
EDITABLE_ITEM_FIELDS = frozenset(
    {"title", "poster_url", "year", "artist", "genres", "rating", "description"}
)


class _ListItemUseCase(BaseUseCase):
    message = "List updated successfully"

    def __init__(self, top_list_service: TopListService) -> None:
        self.top_list_service = top_list_service

    def _edit(self, top_list: TopList, request: Any) -> TopList:
        raise NotImplementedError

    async def execute(self, request: Any) -> UpdateListResponse:
        """Apply the edit to the caller's list.

        Raises:
            ValidationError: If list ID is malformed
            NotFoundError: If list or item not found
            NotAuthorizedError: If user does not own the list
            ValueError: If the edit breaks list rules
        """
        top_list = await load_owned_list(
            self.top_list_service, request.list_id, request.user_id
        )
        saved = await self.top_list_service.save_changes(
            self._edit(top_list, request)
        )
        return UpdateListResponse(
            message=self.message, data=TopListView.from_domain(saved)
        )


class AddListItemUseCase(_ListItemUseCase):
    """Insert an entry at its position, pushing later entries down."""

    message = "Item added successfully"

    def _edit(self, top_list: TopList, request: AddListItemRequest) -> TopList:
        return top_list.with_item_added(request.item)


class UpdateListItemUseCase(_ListItemUseCase):
    """Move an entry or refresh its cached metadata."""

    message = "Item updated successfully"

    def _edit(self, top_list: TopList, request: UpdateListItemRequest) -> TopList:
        unknown = set(request.metadata) - EDITABLE_ITEM_FIELDS
        if unknown:
            raise ValueError(f"Cannot update item fields: {', '.join(sorted(unknown))}")
        return top_list.with_item_updated(
            request.external_id, position=request.position, **request.metadata
        )


class RemoveListItemUseCase(_ListItemUseCase):
    """Remove an entry and close the gap it leaves."""

    message = "Item removed successfully"

    def _edit(self, top_list: TopList, request: RemoveListItemRequest) -> TopList:
        return top_list.with_item_removed(request.external_id)


class ReorderListItemsUseCase(_ListItemUseCase):
    """Assign new positions to several entries at once."""

    message = "Items reordered successfully"

    def _edit(self, top_list: TopList, request: ReorderListItemsRequest) -> TopList:
        return top_list.with_items_reordered(request.positions)

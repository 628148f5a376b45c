"""List use cases."""

from .browse_lists import (
    BrowseListsResponse,
    GetMyListsRequest,
    GetMyListsUseCase,
    GetPublicListsRequest,
    GetPublicListsUseCase,
)
from .create_list import CreateListRequest, CreateListResponse, CreateListUseCase
from .delete_list import DeleteListRequest, DeleteListResponse, DeleteListUseCase
from .get_list import GetListRequest, GetListResponse, GetListUseCase
from .list_items import (
    AddListItemRequest,
    AddListItemUseCase,
    RemoveListItemRequest,
    RemoveListItemUseCase,
    ReorderListItemsRequest,
    ReorderListItemsUseCase,
    UpdateListItemRequest,
    UpdateListItemUseCase,
)
from .update_list import UpdateListRequest, UpdateListResponse, UpdateListUseCase

__all__ = [
    "AddListItemRequest",
    "AddListItemUseCase",
    "BrowseListsResponse",
    "CreateListRequest",
    "CreateListResponse",
    "CreateListUseCase",
    "DeleteListRequest",
    "DeleteListResponse",
    "DeleteListUseCase",
    "GetListRequest",
    "GetListResponse",
    "GetListUseCase",
    "GetMyListsRequest",
    "GetMyListsUseCase",
    "GetPublicListsRequest",
    "GetPublicListsUseCase",
    "RemoveListItemRequest",
    "RemoveListItemUseCase",
    "ReorderListItemsRequest",
    "ReorderListItemsUseCase",
    "UpdateListItemRequest",
    "UpdateListItemUseCase",
    "UpdateListRequest",
    "UpdateListResponse",
    "UpdateListUseCase",
]

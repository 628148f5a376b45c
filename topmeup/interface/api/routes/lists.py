"""List routes: browsing, owner edits, items and the comment thread."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from topmeup.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from topmeup.application.usecase.top_list import (
    AddListItemRequest,
    AddListItemUseCase,
    BrowseListsResponse,
    CreateListRequest,
    CreateListResponse,
    CreateListUseCase,
    DeleteListRequest,
    DeleteListResponse,
    DeleteListUseCase,
    GetListRequest,
    GetListResponse,
    GetListUseCase,
    GetMyListsRequest,
    GetMyListsUseCase,
    GetPublicListsRequest,
    GetPublicListsUseCase,
    RemoveListItemRequest,
    RemoveListItemUseCase,
    ReorderListItemsRequest,
    ReorderListItemsUseCase,
    UpdateListItemRequest,
    UpdateListItemUseCase,
    UpdateListRequest,
    UpdateListResponse,
    UpdateListUseCase,
)
from topmeup.domain.error import (
    AuthenticationRequiredError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.service import JWTService
from topmeup.domain.value import Category, ListItem
from topmeup.interface.api.dependencies import (
    auth_token as request_auth_token,
    require_user,
)

router = APIRouter(prefix="/lists", tags=["lists"], route_class=DishkaRoute)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListItemAPIModel(CamelModel):
    """API model for one ranked list entry."""

    external_id: str
    title: str
    position: int
    category: Category
    poster_url: str | None = None
    year: int | None = None
    artist: str | None = None
    genres: list[str] = Field(default_factory=list)
    rating: float | None = None
    description: str | None = None

    def to_domain(self) -> ListItem:
        return ListItem(**self.model_dump())


class CreateListAPIRequest(CamelModel):
    """API request for creating a list."""

    title: str
    category: Category
    description: str | None = None
    items: list[ListItemAPIModel] = Field(default_factory=list)
    is_public: bool = False


class UpdateListAPIRequest(CamelModel):
    """API request for editing a list; omitted fields are left alone."""

    title: str | None = None
    description: str | None = None
    is_public: bool | None = None
    items: list[ListItemAPIModel] | None = None


class UpdateListItemAPIRequest(CamelModel):
    """API request for moving an entry or refreshing its cached metadata."""

    position: int | None = None
    title: str | None = None
    poster_url: str | None = None
    year: int | None = None
    artist: str | None = None
    genres: list[str] | None = None
    rating: float | None = None
    description: str | None = None


class ItemPositionAPIModel(CamelModel):
    external_id: str
    position: int


class ReorderListItemsAPIRequest(CamelModel):
    """API request for reordering entries."""

    items: list[ItemPositionAPIModel]


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    content: str
    parent_comment_id: str | None = None  # Parent comment ID for replies


@contextmanager
def _list_edit_errors(action: str, list_id: str) -> Iterator[None]:
    """Map owner-only list edit failures to HTTP errors."""
    try:
        yield
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized list edit attempt", action=action, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action}",
        )
    except ValueError as e:
        logfire.warn("List edit validation error", action=action, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error editing list", action=action, list_id=list_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        )


@router.get("", response_model=BrowseListsResponse)
async def get_my_lists(
    get_my_lists_use_case: FromDishka[GetMyListsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    category: str | None = Query(default=None),
    is_public: bool | None = Query(default=None, alias="isPublic"),
    auth_token: str | None = Depends(request_auth_token),
) -> BrowseListsResponse:
    """Page through the caller's own lists, newest first. Requires authentication."""
    user_id = require_user(jwt_service, auth_token, "view your lists")

    try:
        return await get_my_lists_use_case.execute(
            GetMyListsRequest(
                user_id=str(user_id),
                page=page,
                limit=limit,
                category=category,
                is_public=is_public,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error fetching user lists", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch lists",
        )


@router.get("/public", response_model=BrowseListsResponse)
async def get_public_lists(
    get_public_lists_use_case: FromDishka[GetPublicListsUseCase],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    category: str | None = Query(default=None),
    sort_by: str = Query(default="createdAt", alias="sortBy"),
) -> BrowseListsResponse:
    """Page through public lists, sorted descending by createdAt, viewsCount,
    likesCount or commentsCount."""
    try:
        return await get_public_lists_use_case.execute(
            GetPublicListsRequest(
                page=page, limit=limit, category=category, sort_by=sort_by
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error fetching public lists", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch lists",
        )


@router.post(
    "",
    response_model=CreateListResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_list(
    request: CreateListAPIRequest,
    create_list_use_case: FromDishka[CreateListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> CreateListResponse:
    """Create a top list. Requires a registered user (see POST /auth/user)."""
    user_id = require_user(jwt_service, auth_token, "create lists")

    try:
        use_case_request = CreateListRequest(
            user_id=str(user_id),
            title=request.title,
            category=request.category,
            description=request.description,
            items=[item.to_domain() for item in request.items],
            is_public=request.is_public,
        )
        return await create_list_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("List creation by unregistered user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except ValueError as e:
        logfire.warn("List creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating list", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create list",
        )


@router.get("/{list_id}", response_model=GetListResponse)
async def get_list(
    list_id: str,
    get_list_use_case: FromDishka[GetListUseCase],
    auth_token: str | None = Depends(request_auth_token),
) -> GetListResponse:
    """Get a list. Private lists are only visible to their owner."""
    try:
        return await get_list_use_case.execute(
            GetListRequest(list_id=list_id, auth_token=auth_token)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AuthenticationRequiredError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Private list access denied", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to view this list",
        )
    except Exception as e:
        logfire.error("Unexpected error fetching list", list_id=list_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch list",
        )


@router.get("/{list_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    list_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    limit: int | None = Query(default=None),
    cursor: str | None = Query(default=None),
    auth_token: str | None = Depends(request_auth_token),
) -> GetCommentsResponse:
    """Get one page of a list's comment threads.

    Top-level comments come newest first, each with its whole reply tree
    (oldest reply first). Pass the returned nextCursor to get the next page.
    Anonymous viewers get userHasLiked=false everywhere.
    """
    try:
        request = GetCommentsRequest(
            list_id=list_id, limit=limit, cursor=cursor, auth_token=auth_token
        )
        return await get_comments_use_case.execute(request)
    except ValidationError as e:
        logfire.warn("Comment page request rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error fetching comments", list_id=list_id, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )


@router.post(
    "/{list_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    list_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> CreateCommentResponse:
    """Comment on a list or reply to another comment. Requires authentication."""
    user_id = require_user(jwt_service, auth_token, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            list_id=list_id,
            content=request.content,
            user_id=str(user_id),
            parent_comment_id=request.parent_comment_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Comment creation failed - list not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.put("/{list_id}", response_model=UpdateListResponse)
async def update_list(
    list_id: str,
    request: UpdateListAPIRequest,
    update_list_use_case: FromDishka[UpdateListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> UpdateListResponse:
    """Edit title, description, visibility or the whole item set. Owner only."""
    user_id = require_user(jwt_service, auth_token, "edit lists")

    with _list_edit_errors("edit this list", list_id):
        return await update_list_use_case.execute(
            UpdateListRequest(
                list_id=list_id,
                user_id=str(user_id),
                title=request.title,
                description=request.description,
                clear_description="description" in request.model_fields_set
                and request.description is None,
                is_public=request.is_public,
                items=(
                    [item.to_domain() for item in request.items]
                    if request.items is not None
                    else None
                ),
            )
        )


@router.delete("/{list_id}", response_model=DeleteListResponse)
async def delete_list(
    list_id: str,
    delete_list_use_case: FromDishka[DeleteListUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> DeleteListResponse:
    """Delete a list together with its comments. Owner only."""
    user_id = require_user(jwt_service, auth_token, "delete lists")

    with _list_edit_errors("delete this list", list_id):
        return await delete_list_use_case.execute(
            DeleteListRequest(list_id=list_id, user_id=str(user_id))
        )


@router.post(
    "/{list_id}/items",
    response_model=UpdateListResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_list_item(
    list_id: str,
    request: ListItemAPIModel,
    add_list_item_use_case: FromDishka[AddListItemUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> UpdateListResponse:
    """Insert an entry at its position; later entries move down. Owner only."""
    user_id = require_user(jwt_service, auth_token, "edit lists")

    with _list_edit_errors("edit this list", list_id):
        return await add_list_item_use_case.execute(
            AddListItemRequest(
                list_id=list_id, user_id=str(user_id), item=request.to_domain()
            )
        )


@router.put("/{list_id}/items/order", response_model=UpdateListResponse)
async def reorder_list_items(
    list_id: str,
    request: ReorderListItemsAPIRequest,
    reorder_list_items_use_case: FromDishka[ReorderListItemsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> UpdateListResponse:
    """Assign new positions by external ID. Owner only."""
    user_id = require_user(jwt_service, auth_token, "edit lists")

    with _list_edit_errors("edit this list", list_id):
        return await reorder_list_items_use_case.execute(
            ReorderListItemsRequest(
                list_id=list_id,
                user_id=str(user_id),
                positions={i.external_id: i.position for i in request.items},
            )
        )


@router.put("/{list_id}/items/{external_id}", response_model=UpdateListResponse)
async def update_list_item(
    list_id: str,
    external_id: str,
    request: UpdateListItemAPIRequest,
    update_list_item_use_case: FromDishka[UpdateListItemUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> UpdateListResponse:
    """Move an entry or refresh its cached metadata. Owner only."""
    user_id = require_user(jwt_service, auth_token, "edit lists")

    with _list_edit_errors("edit this list", list_id):
        return await update_list_item_use_case.execute(
            UpdateListItemRequest(
                list_id=list_id,
                user_id=str(user_id),
                external_id=external_id,
                position=request.position,
                metadata=request.model_dump(
                    exclude={"position"}, exclude_unset=True
                ),
            )
        )


@router.delete("/{list_id}/items/{external_id}", response_model=UpdateListResponse)
async def remove_list_item(
    list_id: str,
    external_id: str,
    remove_list_item_use_case: FromDishka[RemoveListItemUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> UpdateListResponse:
    """Remove an entry; the rest are renumbered from 1. Owner only."""
    user_id = require_user(jwt_service, auth_token, "edit lists")

    with _list_edit_errors("edit this list", list_id):
        return await remove_list_item_use_case.execute(
            RemoveListItemRequest(
                list_id=list_id, user_id=str(user_id), external_id=external_id
            )
        )

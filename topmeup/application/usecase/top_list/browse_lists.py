"""Browse lists use cases: the caller's own lists and the public catalogue."""

import math
from uuid import UUID

import logfire
from pydantic import BaseModel

from topmeup.application.usecase.base import BaseUseCase, ResponseModel
from topmeup.application.usecase.comment.views import AuthorView
from topmeup.domain.error import ValidationError
from topmeup.domain.model import TopList
from topmeup.domain.repository import ListSortOrder
from topmeup.domain.service import TopListService, UserService
from topmeup.domain.value import Category, UserId

from .views import TopListView


class BrowsedListView(TopListView):
    """A list in a browse page, with its owner's public identity."""

    user: AuthorView | None


class ListPaginationView(ResponseModel):
    """Page-number pagination block."""

    page: int
    limit: int
    total: int
    pages: int


class BrowseListsResponse(ResponseModel):
    """One page of lists."""

    success: bool = True
    data: list[BrowsedListView]
    pagination: ListPaginationView


class GetMyListsRequest(BaseModel):
    """Get my lists request."""

    user_id: str  # User ID from authenticated user
    page: int = 1
    limit: int | None = None
    category: str | None = None
    is_public: bool | None = None


class GetPublicListsRequest(BaseModel):
    """Get public lists request."""

    page: int = 1
    limit: int | None = None
    category: str | None = None
    sort_by: str = ListSortOrder.CREATED_AT.value


def _parse_category(raw: str | None) -> Category | None:
    if raw is None:
        return None
    try:
        return Category(raw)
    except ValueError:
        raise ValidationError(f"Invalid category: {raw}")


def _check_page(page: int) -> None:
    if page < 1:
        raise ValidationError("Page must be 1 or greater")


class _BrowseListsUseCase(BaseUseCase):
    def __init__(
        self, top_list_service: TopListService, user_service: UserService
    ) -> None:
        self.top_list_service = top_list_service
        self.user_service = user_service

    async def _build_page(
        self, lists: list[TopList], total: int, page: int, limit: int
    ) -> BrowseListsResponse:
        identities = await self.user_service.resolve_identities(
            [top_list.user_id for top_list in lists]
        )
        data = [
            BrowsedListView(
                **TopListView.from_domain(top_list).model_dump(),
                user=AuthorView.from_identity(identities.get(str(top_list.user_id))),
            )
            for top_list in lists
        ]
        return BrowseListsResponse(
            data=data,
            pagination=ListPaginationView(
                page=page, limit=limit, total=total, pages=math.ceil(total / limit)
            ),
        )


class GetMyListsUseCase(_BrowseListsUseCase):
    """Use case for paging through the caller's own lists, newest first."""

    async def execute(self, request: GetMyListsRequest) -> BrowseListsResponse:
        """Execute get my lists flow.

        Raises:
            ValidationError: If page or category is invalid
        """
        _check_page(request.page)
        category = _parse_category(request.category)
        limit = self.top_list_service.clamp_limit(request.limit)

        with logfire.span("get_my_lists.execute", user_id=request.user_id):
            lists, total = await self.top_list_service.list_owner_lists(
                UserId(UUID(request.user_id)),
                category=category,
                is_public=request.is_public,
                limit=limit,
                offset=(request.page - 1) * limit,
            )
            return await self._build_page(lists, total, request.page, limit)


class GetPublicListsUseCase(_BrowseListsUseCase):
    """Use case for paging through public lists."""

    async def execute(self, request: GetPublicListsRequest) -> BrowseListsResponse:
        """Execute get public lists flow.

        Raises:
            ValidationError: If page, category or sort field is invalid
        """
        _check_page(request.page)
        category = _parse_category(request.category)
        try:
            sort = ListSortOrder(request.sort_by)
        except ValueError:
            raise ValidationError(f"Cannot sort lists by: {request.sort_by}")
        limit = self.top_list_service.clamp_limit(request.limit)

        with logfire.span("get_public_lists.execute", sort=sort.value):
            lists, total = await self.top_list_service.list_public_lists(
                category=category,
                sort=sort,
                limit=limit,
                offset=(request.page - 1) * limit,
            )
            return await self._build_page(lists, total, request.page, limit)

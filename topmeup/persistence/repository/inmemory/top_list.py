"""In-memory top list repository for testing."""

from typing import Optional

from topmeup.domain.model.top_list import TopList
from topmeup.domain.repository.top_list import ListSortOrder, TopListRepository
from topmeup.domain.value import Category, ListId, UserId

_SORT_FIELDS = {
    ListSortOrder.CREATED_AT: "created_at",
    ListSortOrder.VIEWS_COUNT: "views_count",
    ListSortOrder.LIKES_COUNT: "likes_count",
    ListSortOrder.COMMENTS_COUNT: "comments_count",
}


class InMemoryTopListRepository(TopListRepository):
    """In-memory implementation of TopListRepository for testing."""

    def __init__(self) -> None:
        self._lists: dict[ListId, TopList] = {}

    async def find_by_id(self, list_id: ListId) -> Optional[TopList]:
        """Find a list by ID."""
        return self._lists.get(list_id)

    def _owned(
        self,
        user_id: UserId,
        category: Optional[Category],
        is_public: Optional[bool],
    ) -> list[TopList]:
        return [
            t
            for t in self._lists.values()
            if t.user_id == user_id
            and (category is None or t.category == category)
            and (is_public is None or t.is_public == is_public)
        ]

    def _public(self, category: Optional[Category]) -> list[TopList]:
        return [
            t
            for t in self._lists.values()
            if t.is_public and (category is None or t.category == category)
        ]

    async def find_by_owner(
        self,
        user_id: UserId,
        category: Optional[Category] = None,
        is_public: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[TopList]:
        """Find a user's lists, newest first."""
        lists = self._owned(user_id, category, is_public)
        lists.sort(key=lambda t: t.created_at, reverse=True)
        return lists[offset : offset + limit]

    async def count_by_owner(
        self,
        user_id: UserId,
        category: Optional[Category] = None,
        is_public: Optional[bool] = None,
    ) -> int:
        """Count a user's lists matching the given filters."""
        return len(self._owned(user_id, category, is_public))

    async def find_public(
        self,
        category: Optional[Category] = None,
        sort: ListSortOrder = ListSortOrder.CREATED_AT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[TopList]:
        """Find public lists sorted descending by the requested field."""
        field = _SORT_FIELDS[sort]
        lists = self._public(category)
        lists.sort(key=lambda t: (getattr(t, field), t.created_at), reverse=True)
        return lists[offset : offset + limit]

    async def count_public(self, category: Optional[Category] = None) -> int:
        """Count public lists."""
        return len(self._public(category))

    async def save(self, top_list: TopList) -> TopList:
        """Save or update a list."""
        self._lists[top_list.id] = top_list
        return top_list

    async def delete(self, list_id: ListId) -> None:
        """Remove a list."""
        self._lists.pop(list_id, None)

    async def adjust_comments_count(self, list_id: ListId, delta: int) -> None:
        """Add delta to comments_count (minimum 0)."""
        top_list = self._lists.get(list_id)
        if top_list:
            self._lists[list_id] = top_list.model_copy(
                update={"comments_count": max(0, top_list.comments_count + delta)}
            )

    async def increment_views(self, list_id: ListId) -> None:
        """Increment views_count by 1."""
        top_list = self._lists.get(list_id)
        if top_list:
            self._lists[list_id] = top_list.model_copy(
                update={"views_count": top_list.views_count + 1}
            )

"""Top list domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from topmeup.config import ListSettings
from topmeup.domain.error import NotAuthorizedError, NotFoundError
from topmeup.domain.model import TopList
from topmeup.domain.repository import ListSortOrder, TopListRepository
from topmeup.domain.value import Category, ListId, ListItem, UserId

from .base import Service


class TopListService(Service):
    """Domain service for top list operations."""

    def __init__(
        self, top_list_repository: TopListRepository, settings: ListSettings
    ) -> None:
        """Initialize top list service.

        Args:
            top_list_repository: Top list repository
            settings: List browsing settings
        """
        self.top_list_repository = top_list_repository
        self.settings = settings

    async def create_list(
        self,
        user_id: UserId,
        title: str,
        category: Category,
        description: str | None = None,
        items: list[ListItem] | None = None,
        is_public: bool = False,
    ) -> TopList:
        """Create a new top list.

        Args:
            user_id: Owner user ID
            title: List title
            category: Content category of the list
            description: Optional description
            items: Initial items, ordered by position on save
            is_public: Whether anyone may view the list

        Returns:
            Created list

        Raises:
            ValueError: If items violate list rules
        """
        with logfire.span(
            "top_list_service.create_list",
            user_id=str(user_id),
            category=category.value,
            item_count=len(items or []),
        ):
            now = datetime.now()
            top_list = TopList(
                id=ListId(uuid4()),
                user_id=user_id,
                title=title,
                category=category,
                description=description,
                items=tuple(sorted(items or [], key=lambda item: item.position)),
                is_public=is_public,
                created_at=now,
                updated_at=now,
            )
            saved = await self.top_list_repository.save(top_list)
            logfire.info("List created", list_id=str(saved.id), user_id=str(user_id))
            return saved

    async def get_list_by_id(self, list_id: ListId) -> TopList | None:
        """Get a list by ID.

        Args:
            list_id: List ID

        Returns:
            List if found, None otherwise
        """
        with logfire.span("top_list_service.get_list_by_id", list_id=str(list_id)):
            top_list = await self.top_list_repository.find_by_id(list_id)
            if not top_list:
                logfire.warn("List not found", list_id=str(list_id))
            return top_list

    async def record_view(self, list_id: ListId) -> None:
        """Atomically increment a list's view counter.

        Args:
            list_id: List ID
        """
        with logfire.span("top_list_service.record_view", list_id=str(list_id)):
            await self.top_list_repository.increment_views(list_id)

    async def adjust_comments_count(self, list_id: ListId, delta: int) -> None:
        """Best-effort update of a list's denormalized comment counter.

        Runs after the comment mutation it reflects. A failure here is
        logged and dropped so it never fails that mutation; the counter
        may drift until the next successful update.

        Args:
            list_id: List ID
            delta: +1 for a new comment, -1 for a deleted one
        """
        with logfire.span(
            "top_list_service.adjust_comments_count",
            list_id=str(list_id),
            delta=delta,
        ):
            try:
                await self.top_list_repository.adjust_comments_count(list_id, delta)
            except SQLAlchemyError as e:
                logfire.warn(
                    "Failed to update list comment count",
                    list_id=str(list_id),
                    delta=delta,
                    error=str(e),
                )

    async def get_owned_list(self, list_id: ListId, user_id: UserId) -> TopList:
        """Load a list for an edit by its owner.

        Raises:
            NotFoundError: If list not found
            NotAuthorizedError: If user does not own the list
        """
        top_list = await self.top_list_repository.find_by_id(list_id)
        if not top_list:
            raise NotFoundError("List", str(list_id))
        if not top_list.is_owned_by(user_id):
            logfire.warn(
                "Unauthorized list edit attempt",
                list_id=str(list_id),
                user_id=str(user_id),
                owner_id=str(top_list.user_id),
            )
            raise NotAuthorizedError("list", str(list_id), str(user_id))
        return top_list

    def clamp_limit(self, limit: int | None) -> int:
        """Bound a requested page size to [1, max_page_size]."""
        if limit is None:
            return self.settings.default_page_size
        return max(1, min(limit, self.settings.max_page_size))

    async def list_owner_lists(
        self,
        user_id: UserId,
        category: Category | None,
        is_public: bool | None,
        limit: int,
        offset: int,
    ) -> tuple[list[TopList], int]:
        """Get one page of a user's lists plus the total matching count."""
        with logfire.span(
            "top_list_service.list_owner_lists", user_id=str(user_id), offset=offset
        ):
            lists = await self.top_list_repository.find_by_owner(
                user_id, category=category, is_public=is_public,
                limit=limit, offset=offset,
            )
            total = await self.top_list_repository.count_by_owner(
                user_id, category=category, is_public=is_public
            )
            return lists, total

    async def list_public_lists(
        self,
        category: Category | None,
        sort: ListSortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[TopList], int]:
        """Get one page of public lists plus the total matching count."""
        with logfire.span(
            "top_list_service.list_public_lists", sort=sort.value, offset=offset
        ):
            lists = await self.top_list_repository.find_public(
                category=category, sort=sort, limit=limit, offset=offset
            )
            total = await self.top_list_repository.count_public(category=category)
            return lists, total

    async def save_changes(self, top_list: TopList) -> TopList:
        """Persist an edited list."""
        with logfire.span("top_list_service.save_changes", list_id=str(top_list.id)):
            saved = await self.top_list_repository.save(top_list)
            logfire.info("List updated", list_id=str(top_list.id))
            return saved

    async def delete_list(self, list_id: ListId) -> None:
        """Hard delete a list."""
        with logfire.span("top_list_service.delete_list", list_id=str(list_id)):
            await self.top_list_repository.delete(list_id)
            logfire.info("List deleted", list_id=str(list_id))

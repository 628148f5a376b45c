"""PostgreSQL implementation of TopList repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import case, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from topmeup.domain.model import TopList
from topmeup.domain.repository import ListSortOrder, TopListRepository
from topmeup.domain.value import Category, ListId, UserId
from topmeup.persistence.mappers import row_to_top_list, top_list_to_dict
from topmeup.persistence.tables import lists_table

_SORT_COLUMNS = {
    ListSortOrder.CREATED_AT: lists_table.c.created_at,
    ListSortOrder.VIEWS_COUNT: lists_table.c.views_count,
    ListSortOrder.LIKES_COUNT: lists_table.c.likes_count,
    ListSortOrder.COMMENTS_COUNT: lists_table.c.comments_count,
}


def _owner_filters(
    user_id: UserId, category: Optional[Category], is_public: Optional[bool]
) -> list:
    filters = [lists_table.c.user_id == user_id]
    if category is not None:
        filters.append(lists_table.c.category == category.value)
    if is_public is not None:
        filters.append(lists_table.c.is_public.is_(is_public))
    return filters


def _public_filters(category: Optional[Category]) -> list:
    filters = [lists_table.c.is_public.is_(True)]
    if category is not None:
        filters.append(lists_table.c.category == category.value)
    return filters


class PostgresTopListRepository(TopListRepository):
    """PostgreSQL implementation of TopListRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, list_id: ListId) -> Optional[TopList]:
        """Find a list by ID."""
        stmt = select(lists_table).where(lists_table.c.id == list_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_top_list(dict(row)) if row else None

    async def find_by_owner(
        self,
        user_id: UserId,
        category: Optional[Category] = None,
        is_public: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[TopList]:
        """Find a user's lists, newest first."""
        stmt = (
            select(lists_table)
            .where(*_owner_filters(user_id, category, is_public))
            .order_by(desc(lists_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_top_list(dict(row)) for row in result.mappings().all()]

    async def count_by_owner(
        self,
        user_id: UserId,
        category: Optional[Category] = None,
        is_public: Optional[bool] = None,
    ) -> int:
        """Count a user's lists matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(lists_table)
            .where(*_owner_filters(user_id, category, is_public))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_public(
        self,
        category: Optional[Category] = None,
        sort: ListSortOrder = ListSortOrder.CREATED_AT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[TopList]:
        """Find public lists with filtering and pagination."""
        with logfire.span(
            "top_list_repository.find_public",
            category=category.value if category else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            # Ties fall back to newest first so pages stay stable
            stmt = (
                select(lists_table)
                .where(*_public_filters(category))
                .order_by(desc(_SORT_COLUMNS[sort]), desc(lists_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            lists = [row_to_top_list(dict(row)) for row in result.mappings().all()]
            logfire.info("Found public lists", count=len(lists))
            return lists

    async def count_public(self, category: Optional[Category] = None) -> int:
        """Count public lists, optionally within one category."""
        stmt = (
            select(func.count())
            .select_from(lists_table)
            .where(*_public_filters(category))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, top_list: TopList) -> TopList:
        """Save a list (create or update)."""
        existing = await self.find_by_id(top_list.id)
        list_dict = top_list_to_dict(top_list)

        if existing:
            stmt = (
                lists_table.update()
                .where(lists_table.c.id == top_list.id)
                .values(**list_dict)
            )
        else:
            stmt = lists_table.insert().values(**list_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return top_list

    async def delete(self, list_id: ListId) -> None:
        """Delete a list; its comments go with it through the foreign key."""
        stmt = lists_table.delete().where(lists_table.c.id == list_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_comments_count(self, list_id: ListId, delta: int) -> None:
        """Atomically add delta to comments_count (minimum 0).

        Runs inside a SAVEPOINT so a failure leaves the surrounding request
        transaction usable.
        """
        new_count = lists_table.c.comments_count + delta
        stmt = (
            lists_table.update()
            .where(lists_table.c.id == list_id)
            .values(
                comments_count=case((new_count > 0, new_count), else_=0),
                updated_at=datetime.now(),
            )
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def increment_views(self, list_id: ListId) -> None:
        """Atomically increment views_count by 1."""
        stmt = (
            lists_table.update()
            .where(lists_table.c.id == list_id)
            .values(views_count=lists_table.c.views_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

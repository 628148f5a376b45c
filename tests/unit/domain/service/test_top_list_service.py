"""Unit tests for TopListService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from topmeup.config import ListSettings
from topmeup.domain.error import NotAuthorizedError, NotFoundError
from topmeup.domain.repository import ListSortOrder, TopListRepository
from topmeup.domain.service import TopListService
from topmeup.domain.value import Category, ListId, ListItem, UserId
from topmeup.persistence.repository.inmemory import InMemoryTopListRepository
from tests.factories import seed_list
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class FailingCounterRepository(InMemoryTopListRepository):
    """Store whose counter update always fails."""

    async def adjust_comments_count(self, list_id: ListId, delta: int) -> None:
        raise SQLAlchemyError("boom")


def _item(position: int, external_id: str | None = None) -> ListItem:
    return ListItem(
        external_id=external_id or f"tt{position:07d}",
        title=f"Film {position}",
        position=position,
        category=Category.MOVIES,
    )


class TestCreateList:
    @pytest.mark.asyncio
    async def test_items_are_ordered_by_position(self, unit_env):
        service = await unit_env.get(TopListService)

        top_list = await service.create_list(
            user_id=UserId(uuid4()),
            title="Favourites",
            category=Category.MOVIES,
            items=[_item(3), _item(1), _item(2)],
        )

        assert [item.position for item in top_list.items] == [1, 2, 3]
        assert top_list.comments_count == 0
        assert top_list.is_public is False

    @pytest.mark.asyncio
    async def test_duplicate_item_rejected(self, unit_env):
        service = await unit_env.get(TopListService)

        with pytest.raises(ValueError, match="Item already exists"):
            await service.create_list(
                user_id=UserId(uuid4()),
                title="Dupes",
                category=Category.MOVIES,
                items=[_item(1, "tt1"), _item(2, "tt1")],
            )

    @pytest.mark.asyncio
    async def test_item_category_must_match(self, unit_env):
        service = await unit_env.get(TopListService)
        album = ListItem(
            external_id="mbid-1", title="Album", position=1, category=Category.MUSIC
        )

        with pytest.raises(ValueError, match="category"):
            await service.create_list(
                user_id=UserId(uuid4()),
                title="Mixed",
                category=Category.MOVIES,
                items=[album],
            )


class TestCounters:
    @pytest.mark.asyncio
    async def test_adjust_comments_count_never_negative(self, unit_env):
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        top_list = await seed_list(list_repo)

        await service.adjust_comments_count(top_list.id, 1)
        await service.adjust_comments_count(top_list.id, -1)
        await service.adjust_comments_count(top_list.id, -1)

        stored = await list_repo.find_by_id(top_list.id)
        assert stored.comments_count == 0

    @pytest.mark.asyncio
    async def test_counter_failure_is_swallowed(self):
        repo = FailingCounterRepository()
        service = TopListService(top_list_repository=repo, settings=ListSettings())
        top_list = await seed_list(repo)

        # Must not raise
        await service.adjust_comments_count(top_list.id, 1)

        stored = await repo.find_by_id(top_list.id)
        assert stored.comments_count == 0

    @pytest.mark.asyncio
    async def test_record_view(self, unit_env):
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        top_list = await seed_list(list_repo)

        await service.record_view(top_list.id)
        await service.record_view(top_list.id)

        stored = await list_repo.find_by_id(top_list.id)
        assert stored.views_count == 2


class TestOwnership:
    @pytest.mark.asyncio
    async def test_owner_gets_list(self, unit_env):
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        owner = UserId(uuid4())
        top_list = await seed_list(list_repo, owner_id=owner)

        assert (await service.get_owned_list(top_list.id, owner)).id == top_list.id

    @pytest.mark.asyncio
    async def test_other_user_rejected(self, unit_env):
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        top_list = await seed_list(list_repo)

        with pytest.raises(NotAuthorizedError):
            await service.get_owned_list(top_list.id, UserId(uuid4()))
        with pytest.raises(NotFoundError):
            await service.get_owned_list(ListId(uuid4()), UserId(uuid4()))


class TestBrowsing:
    @pytest.mark.asyncio
    async def test_public_lists_sorted_by_views(self, unit_env):
        # Arrange
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        quiet = await seed_list(list_repo, offset_minutes=2)
        popular = await seed_list(list_repo, offset_minutes=1)
        await seed_list(list_repo, is_public=False)
        for _ in range(3):
            await service.record_view(popular.id)

        # Act
        by_views, total = await service.list_public_lists(
            None, ListSortOrder.VIEWS_COUNT, limit=10, offset=0
        )
        newest, _ = await service.list_public_lists(
            None, ListSortOrder.CREATED_AT, limit=1, offset=0
        )

        # Assert
        assert [t.id for t in by_views] == [popular.id, quiet.id]
        assert total == 2
        assert [t.id for t in newest] == [quiet.id]

    @pytest.mark.asyncio
    async def test_owner_lists_filtered(self, unit_env):
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        owner = UserId(uuid4())
        games = await seed_list(list_repo, owner_id=owner, category=Category.GAMES)
        await seed_list(list_repo, owner_id=owner, is_public=False)
        await seed_list(list_repo)

        everything, total = await service.list_owner_lists(
            owner, None, None, limit=10, offset=0
        )
        only_games, games_total = await service.list_owner_lists(
            owner, Category.GAMES, True, limit=10, offset=0
        )

        assert total == 2 and len(everything) == 2
        assert [t.id for t in only_games] == [games.id]
        assert games_total == 1

    @pytest.mark.asyncio
    async def test_clamp_limit(self, unit_env):
        service = await unit_env.get(TopListService)

        assert service.clamp_limit(None) == 10
        assert service.clamp_limit(0) == 1
        assert service.clamp_limit(500) == 100


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_list(self, unit_env):
        service = await unit_env.get(TopListService)
        list_repo = await unit_env.get(TopListRepository)
        top_list = await seed_list(list_repo)

        await service.delete_list(top_list.id)

        assert await list_repo.find_by_id(top_list.id) is None

"""Unit tests for CreateListUseCase."""

from uuid import UUID, uuid4

import pytest
import pytest_asyncio

from topmeup.application.usecase.top_list import CreateListRequest, CreateListUseCase
from topmeup.domain.error import NotFoundError
from topmeup.domain.repository import TopListRepository, UserRepository
from topmeup.domain.value import Category, ListId, ListItem
from tests.factories import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _item(external_id: str, position: int, category=Category.MOVIES) -> ListItem:
    return ListItem(
        external_id=external_id,
        title=f"Title {external_id}",
        position=position,
        category=category,
    )


@pytest_asyncio.fixture
async def owner_id(unit_env) -> str:
    user_repo = await unit_env.get(UserRepository)
    return str((await seed_user(user_repo, "Alice")).id)


class TestCreateListUseCase:
    @pytest.mark.asyncio
    async def test_items_are_ordered_by_position(self, unit_env, owner_id):
        # Arrange
        use_case = await unit_env.get(CreateListUseCase)
        list_repo = await unit_env.get(TopListRepository)

        # Act
        response = await use_case.execute(
            CreateListRequest(
                user_id=owner_id,
                title="  Best heist films  ",
                category=Category.MOVIES,
                items=[_item("tt2", 2), _item("tt1", 1)],
                is_public=True,
            )
        )

        # Assert
        assert response.data.title == "Best heist films"
        assert response.data.user_id == owner_id
        assert [i.external_id for i in response.data.items] == ["tt1", "tt2"]
        assert response.data.comments_count == 0

        stored = await list_repo.find_by_id(ListId(UUID(response.data.id)))
        assert stored is not None

    @pytest.mark.asyncio
    async def test_owner_must_be_registered(self, unit_env):
        use_case = await unit_env.get(CreateListUseCase)

        with pytest.raises(NotFoundError, match="User"):
            await use_case.execute(
                CreateListRequest(
                    user_id=str(uuid4()), title="Orphan", category=Category.GAMES
                )
            )

    @pytest.mark.asyncio
    async def test_item_category_must_match(self, unit_env, owner_id):
        use_case = await unit_env.get(CreateListUseCase)

        with pytest.raises(ValueError, match="category"):
            await use_case.execute(
                CreateListRequest(
                    user_id=owner_id,
                    title="Mixed",
                    category=Category.MOVIES,
                    items=[_item("a1", 1, Category.MUSIC)],
                )
            )

    @pytest.mark.asyncio
    async def test_duplicate_items_rejected(self, unit_env, owner_id):
        use_case = await unit_env.get(CreateListUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateListRequest(
                    user_id=owner_id,
                    title="Dupes",
                    category=Category.MOVIES,
                    items=[_item("tt1", 1), _item("tt1", 2)],
                )
            )

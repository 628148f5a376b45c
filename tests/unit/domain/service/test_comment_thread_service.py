"""Unit tests for CommentThreadService."""

from uuid import uuid4

import pytest

from topmeup.domain.repository import (
    CommentRepository,
    TopListRepository,
    UserRepository,
)
from topmeup.domain.service import CommentThreadService, UserService
from topmeup.domain.value import ListId, PageCursor, UserId
from tests.factories import seed_comment, seed_list, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestClampLimit:
    """Tests for clamp_limit."""

    @pytest.mark.asyncio
    async def test_defaults_to_twenty(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        assert service.clamp_limit(None) == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("requested", "expected"), [(0, 1), (-5, 1), (1, 1), (50, 50), (500, 100)]
    )
    async def test_bounds_requested_limit(self, unit_env, requested, expected):
        service = await unit_env.get(CommentThreadService)
        assert service.clamp_limit(requested) == expected


class TestFetchRootPage:
    """Tests for fetch_root_page."""

    @pytest.mark.asyncio
    async def test_pages_newest_first_with_cursor(self, unit_env):
        """Three roots fetched two at a time come back c3, c2 then c1."""
        # Arrange
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        c1 = await seed_comment(comment_repo, list_id, author, "first", offset_minutes=1)
        c2 = await seed_comment(comment_repo, list_id, author, "second", offset_minutes=2)
        c3 = await seed_comment(comment_repo, list_id, author, "third", offset_minutes=3)

        # Act
        first = await service.fetch_root_page(list_id, limit=2)
        second = await service.fetch_root_page(list_id, limit=2, cursor=first.next_cursor)

        # Assert
        assert [c.id for c in first.comments] == [c3.id, c2.id]
        assert first.has_next is True
        assert first.next_cursor == PageCursor.after(c2.id)

        assert [c.id for c in second.comments] == [c1.id]
        assert second.has_next is False
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_exact_page_size_has_no_next_page(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())
        await seed_comment(comment_repo, list_id, author, "one")
        await seed_comment(comment_repo, list_id, author, "two")

        page = await service.fetch_root_page(list_id, limit=2)

        assert len(page.comments) == 2
        assert page.has_next is False
        assert page.next_cursor is None

    @pytest.mark.asyncio
    async def test_replies_and_other_lists_are_not_roots(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        root = await seed_comment(comment_repo, list_id, author, "root")
        await seed_comment(comment_repo, list_id, author, "reply", parent=root)
        await seed_comment(comment_repo, ListId(uuid4()), author, "elsewhere")

        page = await service.fetch_root_page(list_id, limit=10)

        assert [c.id for c in page.comments] == [root.id]

    @pytest.mark.asyncio
    async def test_deleted_root_without_replies_is_hidden(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        kept = await seed_comment(comment_repo, list_id, author, "kept")
        await seed_comment(
            comment_repo, list_id, author, "This comment has been deleted", is_deleted=True
        )

        page = await service.fetch_root_page(list_id, limit=10)

        assert [c.id for c in page.comments] == [kept.id]

    @pytest.mark.asyncio
    async def test_pages_never_repeat_or_skip_roots(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())
        seeded = [
            await seed_comment(comment_repo, list_id, author, f"comment {i}")
            for i in range(7)
        ]

        seen = []
        cursor = None
        while True:
            page = await service.fetch_root_page(list_id, limit=3, cursor=cursor)
            seen.extend(c.id for c in page.comments)
            if not page.has_next:
                break
            cursor = page.next_cursor

        assert seen == sorted((c.id for c in seeded), reverse=True)


class TestLoadReplies:
    """Tests for load_replies."""

    @pytest.mark.asyncio
    async def test_loads_every_depth(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        root = await seed_comment(comment_repo, list_id, author, "root")
        level1 = await seed_comment(comment_repo, list_id, author, "l1", parent=root)
        level2 = await seed_comment(comment_repo, list_id, author, "l2", parent=level1)
        level3 = await seed_comment(comment_repo, list_id, author, "l3", parent=level2)

        replies = await service.load_replies([root.id])

        assert [c.id for c in replies] == [level1.id, level2.id, level3.id]

    @pytest.mark.asyncio
    async def test_no_roots_means_no_replies(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        assert await service.load_replies([]) == []

    @pytest.mark.asyncio
    async def test_includes_deleted_replies(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        root = await seed_comment(comment_repo, list_id, author, "root")
        gone = await seed_comment(
            comment_repo, list_id, author, "gone", parent=root, is_deleted=True
        )

        replies = await service.load_replies([root.id])

        assert [c.id for c in replies] == [gone.id]


class TestBuildTree:
    """Tests for build_tree, covering the documented thread scenarios."""

    @pytest.mark.asyncio
    async def test_nested_replies_oldest_first(self, unit_env):
        """c1 has r1 and r2; r2 has r3."""
        # Arrange
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        c1 = await seed_comment(comment_repo, list_id, author, "c1")
        r1 = await seed_comment(comment_repo, list_id, author, "r1", parent=c1)
        r2 = await seed_comment(comment_repo, list_id, author, "r2", parent=c1)
        r3 = await seed_comment(comment_repo, list_id, author, "r3", parent=r2)

        # Act
        page = await service.fetch_root_page(list_id, limit=10)
        replies = await service.load_replies([c.id for c in page.comments])
        forest = service.build_tree(page.comments, replies, identities={})

        # Assert
        assert len(forest) == 1
        node = forest[0]
        assert node.comment.id == c1.id
        assert [r.comment.id for r in node.replies] == [r1.id, r2.id]
        assert node.replies[0].replies == []
        assert [r.comment.id for r in node.replies[1].replies] == [r3.id]

    @pytest.mark.asyncio
    async def test_siblings_sorted_regardless_of_input_order(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        root = await seed_comment(comment_repo, list_id, author, "root")
        a = await seed_comment(comment_repo, list_id, author, "a", parent=root)
        b = await seed_comment(comment_repo, list_id, author, "b", parent=root)

        forest = service.build_tree([root], [b, a], identities={})

        assert [r.comment.id for r in forest[0].replies] == [a.id, b.id]

    @pytest.mark.asyncio
    async def test_deleted_root_with_reply_keeps_thread(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())

        c1 = await seed_comment(
            comment_repo, list_id, author, "original text", is_deleted=True
        )
        r1 = await seed_comment(comment_repo, list_id, author, "still here", parent=c1)

        # Act
        page = await service.fetch_root_page(list_id, limit=10)
        replies = await service.load_replies([c.id for c in page.comments])
        forest = service.build_tree(page.comments, replies, identities={})

        # Assert
        assert [n.comment.id for n in forest] == [c1.id]
        assert forest[0].comment.content == "This comment has been deleted"
        assert forest[0].comment.is_deleted is True
        assert [r.comment.id for r in forest[0].replies] == [r1.id]
        assert forest[0].replies[0].comment.content == "still here"

    @pytest.mark.asyncio
    async def test_anonymous_viewer_never_has_liked(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())
        liker = UserId(uuid4())

        root = await seed_comment(
            comment_repo, list_id, author, "popular", likes=frozenset({liker})
        )
        reply = await seed_comment(
            comment_repo,
            list_id,
            author,
            "also liked",
            parent=root,
            likes=frozenset({liker}),
        )

        forest = service.build_tree([root], [reply], identities={}, viewer_id=None)

        assert forest[0].user_has_liked is False
        assert forest[0].replies[0].user_has_liked is False
        assert forest[0].comment.likes_count == 1

    @pytest.mark.asyncio
    async def test_viewer_like_state_per_node(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_id = ListId(uuid4())
        author = UserId(uuid4())
        viewer = UserId(uuid4())

        root = await seed_comment(
            comment_repo, list_id, author, "liked", likes=frozenset({viewer})
        )
        reply = await seed_comment(comment_repo, list_id, author, "not liked", parent=root)

        forest = service.build_tree([root], [reply], identities={}, viewer_id=viewer)

        assert forest[0].user_has_liked is True
        assert forest[0].replies[0].user_has_liked is False

    @pytest.mark.asyncio
    async def test_missing_author_resolves_to_none(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentThreadService)
        user_service = await unit_env.get(UserService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        list_id = ListId(uuid4())

        alice = await seed_user(user_repo, "Alice")
        ghost = UserId(uuid4())  # never stored

        root = await seed_comment(comment_repo, list_id, ghost, "from a ghost")
        reply = await seed_comment(comment_repo, list_id, ghost, "again", parent=root)
        other = await seed_comment(comment_repo, list_id, alice.id, "hi")

        # Act
        identities = await user_service.resolve_identities(
            [root.user_id, reply.user_id, other.user_id]
        )
        forest = service.build_tree([other, root], [reply], identities)

        # Assert
        assert forest[0].author is not None
        assert forest[0].author.display_name.root == "Alice"
        assert forest[1].author is None
        assert forest[1].replies[0].author is None


class TestCountComments:
    """Tests for count_comments."""

    @pytest.mark.asyncio
    async def test_counts_all_depths_and_deleted(self, unit_env):
        service = await unit_env.get(CommentThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        list_repo = await unit_env.get(TopListRepository)
        top_list = await seed_list(list_repo)
        author = UserId(uuid4())

        root = await seed_comment(comment_repo, top_list.id, author, "root")
        await seed_comment(comment_repo, top_list.id, author, "reply", parent=root)
        await seed_comment(comment_repo, top_list.id, author, "gone", is_deleted=True)
        await seed_comment(comment_repo, ListId(uuid4()), author, "other list")

        assert await service.count_comments(top_list.id) == 3

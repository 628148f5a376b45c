"""Unit tests for the Comment entity."""

from uuid import uuid4

from topmeup.domain.model import Comment
from topmeup.domain.value import CommentId, ListId, UserId


def _comment(**fields) -> Comment:
    return Comment(
        list_id=ListId(uuid4()), user_id=UserId(uuid4()), content="hi", **fields
    )


class TestLikesCount:
    def test_derived_from_likes(self):
        fans = frozenset({UserId(uuid4()), UserId(uuid4())})
        assert _comment(likes=fans).likes_count == 2

    def test_stale_count_is_overridden(self):
        comment = _comment(likes=frozenset({UserId(uuid4())}), likes_count=42)
        assert comment.likes_count == 1

    def test_duplicate_likes_collapse(self):
        fan = UserId(uuid4())
        comment = _comment(likes=[fan, fan])
        assert comment.likes == frozenset({fan})
        assert comment.likes_count == 1


class TestViewerState:
    def test_liked_by_anonymous_is_false(self):
        fan = UserId(uuid4())
        assert _comment(likes=frozenset({fan})).liked_by(None) is False

    def test_liked_by_member(self):
        fan = UserId(uuid4())
        comment = _comment(likes=frozenset({fan}))
        assert comment.liked_by(fan) is True
        assert comment.liked_by(UserId(uuid4())) is False

    def test_top_level(self):
        assert _comment().is_top_level
        assert not _comment(parent_comment_id=CommentId(1)).is_top_level

"""Unit tests for LikeCommentUseCase and UnlikeCommentUseCase."""

from uuid import uuid4

import pytest

from topmeup.application.usecase.comment import (
    LikeCommentRequest,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from topmeup.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.repository import CommentRepository
from topmeup.domain.value import UserId
from tests.factories import seed_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikeComment:
    @pytest.mark.asyncio
    async def test_like_then_like_again(self, unit_env):
        # Arrange
        like = await unit_env.get(LikeCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await seed_comment(comment_repo, uuid4(), UserId(uuid4()), "nice")
        request = LikeCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))

        # Act
        first = await like.execute(request)
        second = await like.execute(request)

        # Assert
        assert first.data.likes_count == 1
        assert first.data.user_has_liked is True
        assert second.data.likes_count == 1

    @pytest.mark.asyncio
    async def test_cannot_like_deleted_comment(self, unit_env):
        like = await unit_env.get(LikeCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await seed_comment(
            comment_repo, uuid4(), UserId(uuid4()), "gone", is_deleted=True
        )

        with pytest.raises(BusinessRuleViolationError):
            await like.execute(
                LikeCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_and_unknown_ids(self, unit_env):
        like = await unit_env.get(LikeCommentUseCase)

        with pytest.raises(ValidationError):
            await like.execute(LikeCommentRequest(comment_id="nope", user_id=str(uuid4())))
        with pytest.raises(NotFoundError):
            await like.execute(LikeCommentRequest(comment_id="77", user_id=str(uuid4())))


class TestUnlikeComment:
    @pytest.mark.asyncio
    async def test_unlike_after_like(self, unit_env):
        like = await unit_env.get(LikeCommentUseCase)
        unlike = await unit_env.get(UnlikeCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await seed_comment(comment_repo, uuid4(), UserId(uuid4()), "hmm")
        request = LikeCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
        await like.execute(request)

        response = await unlike.execute(request)

        assert response.data.likes_count == 0
        assert response.data.user_has_liked is False

    @pytest.mark.asyncio
    async def test_unlike_without_like(self, unit_env):
        unlike = await unit_env.get(UnlikeCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        fan = UserId(uuid4())
        other = UserId(uuid4())
        comment = await seed_comment(
            comment_repo, uuid4(), UserId(uuid4()), "liked", likes=frozenset({fan})
        )

        response = await unlike.execute(
            LikeCommentRequest(comment_id=str(comment.id), user_id=str(other))
        )

        assert response.data.likes_count == 1
        assert response.data.user_has_liked is False

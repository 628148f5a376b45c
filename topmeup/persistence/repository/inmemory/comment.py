"""In-memory comment repository for testing."""

from collections.abc import Collection
from itertools import count
from typing import Optional

from topmeup.domain.model.comment import Comment
from topmeup.domain.repository.comment import CommentRepository
from topmeup.domain.value import CommentId, ListId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    IDs come from a counter, so they grow with insertion order like the
    database identity column.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    def _has_reply(self, comment_id: CommentId) -> bool:
        return any(c.parent_comment_id == comment_id for c in self._comments.values())

    async def find_roots(
        self,
        list_id: ListId,
        limit: int,
        before: Optional[CommentId] = None,
    ) -> list[Comment]:
        """Find eligible top-level comments of a list, newest first."""
        roots = [
            c
            for c in self._comments.values()
            if c.list_id == list_id
            and c.is_top_level
            and (before is None or c.id < before)
            and (not c.is_deleted or self._has_reply(c.id))
        ]
        roots.sort(key=lambda c: c.id, reverse=True)
        return roots[:limit]

    async def find_children(self, parent_ids: Collection[CommentId]) -> list[Comment]:
        """Find direct replies of any of the given comments, oldest first."""
        wanted = set(parent_ids)
        children = [
            c for c in self._comments.values() if c.parent_comment_id in wanted
        ]
        children.sort(key=lambda c: c.id)
        return children

    async def count_by_list(self, list_id: ListId) -> int:
        """Count every comment of a list, deleted or not."""
        return sum(1 for c in self._comments.values() if c.list_id == list_id)

    async def delete_by_list(self, list_id: ListId) -> int:
        """Remove every comment of a list."""
        doomed = [c.id for c in self._comments.values() if c.list_id == list_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment, allocating an ID on first save."""
        data = comment.model_dump()
        if comment.id is None:
            data["id"] = CommentId(next(self._ids))
        saved = Comment.model_validate(data)
        self._comments[saved.id] = saved
        return saved

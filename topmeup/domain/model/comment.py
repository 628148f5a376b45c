"""Comment entity.

Comments are threaded discussions on top lists with unlimited depth.
Threading is a plain parent pointer; trees are rebuilt in memory when a
page of comments is read.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from topmeup.domain.model.common import DomainModel
from topmeup.domain.value import CommentId, ListId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a list or a reply to another comment.

    - id: Allocated by the store on first save, strictly increasing
    - parent_comment_id: Direct parent comment (None for top-level)
    - likes: IDs of users who liked the comment, one entry per user
    - likes_count: Always len(likes); recomputed whenever the comment is built
    - is_deleted: Soft-delete flag; content is replaced by a placeholder
    """

    id: Optional[CommentId] = None
    list_id: ListId
    user_id: UserId
    content: str = Field(min_length=1, max_length=500)
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    is_deleted: bool = False
    likes: frozenset[UserId] = frozenset()
    likes_count: int = Field(default=0, ge=0)
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def sync_likes_count(cls, data: Any) -> Any:
        """Derive likes_count from the likes set."""
        if isinstance(data, dict):
            data = {**data, "likes_count": len(set(data.get("likes") or ()))}
        return data

    @property
    def is_top_level(self) -> bool:
        """Whether the comment anchors a reply tree."""
        return self.parent_comment_id is None

    def liked_by(self, user_id: UserId | None) -> bool:
        """Whether the given viewer has liked this comment."""
        return user_id is not None and user_id in self.likes

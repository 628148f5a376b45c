"""Comment shapes shared by the comment use case responses."""

from datetime import datetime

from pydantic import Field

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.model.comment import Comment
from topmeup.domain.service import AuthorIdentity, CommentNode
from topmeup.domain.value import UserId


class AuthorView(ResponseModel):
    """Public author identity attached to a comment."""

    id: str = Field(alias="_id")
    display_name: str

    @classmethod
    def from_identity(cls, identity: AuthorIdentity | None) -> "AuthorView | None":
        if identity is None:
            return None
        return cls(id=str(identity.id), display_name=identity.display_name.root)


class CommentView(ResponseModel):
    """A single comment as returned by mutations."""

    id: str = Field(alias="_id")
    list_id: str
    user_id: str
    content: str
    is_edited: bool
    edited_at: datetime | None = None
    is_deleted: bool
    parent_comment_id: str | None
    likes_count: int
    user_has_liked: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(
        cls, comment: Comment, viewer_id: UserId | None = None
    ) -> "CommentView":
        return cls(
            id=str(comment.id),
            list_id=str(comment.list_id),
            user_id=str(comment.user_id),
            content=comment.content,
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            is_deleted=comment.is_deleted,
            parent_comment_id=(
                str(comment.parent_comment_id)
                if comment.parent_comment_id is not None
                else None
            ),
            likes_count=comment.likes_count,
            user_has_liked=comment.liked_by(viewer_id),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentNodeView(CommentView):
    """A comment in a thread, with its author and nested replies."""

    user: AuthorView | None
    replies: list["CommentNodeView"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeView":
        """Recursively convert a domain comment node to its response shape."""
        comment = node.comment
        return cls(
            **CommentView.from_domain(comment).model_dump(exclude={"user_has_liked"}),
            user_has_liked=node.user_has_liked,
            user=AuthorView.from_identity(node.author),
            replies=[cls.from_node(child) for child in node.replies],
        )

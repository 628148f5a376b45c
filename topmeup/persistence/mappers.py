"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from topmeup.domain.model import Comment, TopList, User
from topmeup.domain.value import (
    Category,
    CommentId,
    DisplayName,
    ListId,
    ListItem,
    UserId,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        email=row["email"],
        display_name=DisplayName(row["display_name"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_top_list(row: Dict[str, Any]) -> TopList:
    """Convert database row to TopList domain model.

    Items are stored as a JSONB array and validated back into ListItems.

    Args:
        row: Database row as dict

    Returns:
        TopList domain model
    """
    return TopList(
        id=ListId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        title=row["title"],
        category=Category(row["category"]),
        description=row.get("description"),
        items=tuple(ListItem.model_validate(item) for item in row["items"] or []),
        is_public=row["is_public"],
        likes_count=row["likes_count"],
        comments_count=row["comments_count"],
        views_count=row["views_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def top_list_to_dict(top_list: TopList) -> Dict[str, Any]:
    """Convert TopList domain model to database dict."""
    data = top_list.model_dump(exclude={"items"})
    data["category"] = top_list.category.value
    data["items"] = [item.model_dump(mode="json") for item in top_list.items]
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    likes_count is derived from the likes array by the model itself.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        list_id=ListId(_as_uuid(row["list_id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        content=row["content"],
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        is_deleted=row["is_deleted"],
        likes=frozenset(UserId(_as_uuid(u)) for u in row["likes"] or []),
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The ID is left out; it is allocated by the database on insert.
    """
    data = comment.model_dump(exclude={"id", "likes"})
    data["likes"] = sorted(comment.likes, key=str)
    data["likes_count"] = len(comment.likes)
    return data

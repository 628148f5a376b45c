"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_thread_service import CommentNode, CommentThreadService, RootPage
from .jwt_service import JWTService
from .top_list_service import TopListService
from .user_service import AuthorIdentity, UserService

__all__ = [
    "AuthorIdentity",
    "CommentNode",
    "CommentService",
    "CommentThreadService",
    "JWTService",
    "RootPage",
    "Service",
    "TopListService",
    "UserService",
]

"""Domain layer DI providers."""

from dishka import Scope, provide

from topmeup.config import AuthSettings, CommentSettings, ListSettings
from topmeup.domain.repository import (
    CommentRepository,
    TopListRepository,
    UserRepository,
)
from topmeup.domain.service import (
    CommentService,
    CommentThreadService,
    JWTService,
    TopListService,
    UserService,
)
from topmeup.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, settings=settings)

    @provide
    def get_comment_thread_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentThreadService:
        """Provide comment thread reading service."""
        return CommentThreadService(
            comment_repository=comment_repository, settings=settings
        )

    @provide
    def get_top_list_service(
        self, top_list_repository: TopListRepository, settings: ListSettings
    ) -> TopListService:
        """Provide top list domain service."""
        return TopListService(
            top_list_repository=top_list_repository, settings=settings
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

"""Application layer DI providers."""

from dishka import Scope, provide

from topmeup.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentUseCase,
)
from topmeup.application.usecase.top_list import (
    AddListItemUseCase,
    CreateListUseCase,
    DeleteListUseCase,
    GetListUseCase,
    GetMyListsUseCase,
    GetPublicListsUseCase,
    RemoveListItemUseCase,
    ReorderListItemsUseCase,
    UpdateListItemUseCase,
    UpdateListUseCase,
)
from topmeup.application.usecase.user import GetProfileUseCase, UpsertUserUseCase
from topmeup.domain.service import (
    CommentService,
    CommentThreadService,
    JWTService,
    TopListService,
    UserService,
)
from topmeup.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_thread_service: CommentThreadService,
        top_list_service: TopListService,
        user_service: UserService,
        jwt_service: JWTService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_thread_service=comment_thread_service,
            top_list_service=top_list_service,
            user_service=user_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        top_list_service: TopListService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            top_list_service=top_list_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        top_list_service: TopListService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            top_list_service=top_list_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, comment_service: CommentService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(comment_service=comment_service)

    # List use cases
    @provide(scope=Scope.REQUEST)
    def get_create_list_use_case(
        self, top_list_service: TopListService, user_service: UserService
    ) -> CreateListUseCase:
        """Provide create list use case."""
        return CreateListUseCase(
            top_list_service=top_list_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_list_use_case(
        self, top_list_service: TopListService, jwt_service: JWTService
    ) -> GetListUseCase:
        """Provide get list use case."""
        return GetListUseCase(
            top_list_service=top_list_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_my_lists_use_case(
        self, top_list_service: TopListService, user_service: UserService
    ) -> GetMyListsUseCase:
        """Provide get my lists use case."""
        return GetMyListsUseCase(
            top_list_service=top_list_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_public_lists_use_case(
        self, top_list_service: TopListService, user_service: UserService
    ) -> GetPublicListsUseCase:
        """Provide get public lists use case."""
        return GetPublicListsUseCase(
            top_list_service=top_list_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_list_use_case(
        self, top_list_service: TopListService
    ) -> UpdateListUseCase:
        """Provide update list use case."""
        return UpdateListUseCase(top_list_service=top_list_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_list_use_case(
        self, top_list_service: TopListService, comment_service: CommentService
    ) -> DeleteListUseCase:
        """Provide delete list use case."""
        return DeleteListUseCase(
            top_list_service=top_list_service, comment_service=comment_service
        )

    # List item use cases
    @provide(scope=Scope.REQUEST)
    def get_add_list_item_use_case(
        self, top_list_service: TopListService
    ) -> AddListItemUseCase:
        return AddListItemUseCase(top_list_service=top_list_service)

    @provide(scope=Scope.REQUEST)
    def get_update_list_item_use_case(
        self, top_list_service: TopListService
    ) -> UpdateListItemUseCase:
        return UpdateListItemUseCase(top_list_service=top_list_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_list_item_use_case(
        self, top_list_service: TopListService
    ) -> RemoveListItemUseCase:
        return RemoveListItemUseCase(top_list_service=top_list_service)

    @provide(scope=Scope.REQUEST)
    def get_reorder_list_items_use_case(
        self, top_list_service: TopListService
    ) -> ReorderListItemsUseCase:
        return ReorderListItemsUseCase(top_list_service=top_list_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_upsert_user_use_case(self, user_service: UserService) -> UpsertUserUseCase:
        """Provide upsert user use case."""
        return UpsertUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

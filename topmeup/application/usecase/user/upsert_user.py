"""Upsert user use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from topmeup.application.usecase.base import BaseUseCase, ResponseModel
from topmeup.domain.error import ValidationError
from topmeup.domain.service import UserService
from topmeup.domain.value import DisplayName, UserId

from .views import UserView


class UpsertUserRequest(BaseModel):
    """Upsert user request."""

    user_id: str  # User ID from authenticated user
    email: str | None = None
    display_name: str | None = None


class UpsertUserResponse(ResponseModel):
    """Upsert user response."""

    success: bool = True
    user: UserView


class UpsertUserUseCase(BaseUseCase):
    """Use case for registering a signed-in user or refreshing their profile.

    The web client calls it after every sign-in so lists and comments can
    be attributed to a stored profile.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize upsert user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpsertUserRequest) -> UpsertUserResponse:
        """Execute upsert user flow.

        Raises:
            ValidationError: If email or display name is missing or malformed
            BusinessRuleViolationError: If the email belongs to another user
        """
        if not request.email or not request.display_name:
            raise ValidationError(
                "Missing required fields: email and displayName are required"
            )

        try:
            display_name = DisplayName(request.display_name)
        except ValueError as e:
            raise ValidationError(str(e))

        with logfire.span("upsert_user.execute", user_id=request.user_id):
            try:
                user = await self.user_service.upsert_user(
                    user_id=UserId(UUID(request.user_id)),
                    email=request.email,
                    display_name=display_name,
                )
            except ValueError as e:
                raise ValidationError(str(e))

        return UpsertUserResponse(user=UserView.from_domain(user))

"""Get profile use case."""

from uuid import UUID

from pydantic import BaseModel

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.service import UserService
from topmeup.domain.value import UserId

from .views import UserView


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # User ID from authenticated user


class GetProfileResponse(ResponseModel):
    """Get profile response."""

    success: bool = True
    user: UserView


class GetProfileUseCase:
    """Use case for reading the signed-in user's profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the user has not registered yet
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetProfileResponse(user=UserView.from_domain(user))

"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .upsert_user import UpsertUserRequest, UpsertUserResponse, UpsertUserUseCase
from .views import UserView

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "UpsertUserRequest",
    "UpsertUserResponse",
    "UpsertUserUseCase",
    "UserView",
]

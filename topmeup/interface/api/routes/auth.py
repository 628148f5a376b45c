"""Sign-in routes: register the signed-in user and read their profile."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from topmeup.application.usecase.user import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    UpsertUserRequest,
    UpsertUserResponse,
    UpsertUserUseCase,
)
from topmeup.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.service import JWTService
from topmeup.interface.api.dependencies import (
    auth_token as request_auth_token,
    require_user,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class UpsertUserAPIRequest(BaseModel):
    """API request for registering the signed-in user.

    Both fields fall back to the session token's email and name claims.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str | None = None
    display_name: str | None = None


@router.post("/user", response_model=UpsertUserResponse)
async def upsert_user(
    upsert_user_use_case: FromDishka[UpsertUserUseCase],
    jwt_service: FromDishka[JWTService],
    request: UpsertUserAPIRequest | None = Body(default=None),
    auth_token: str | None = Depends(request_auth_token),
) -> UpsertUserResponse:
    """Create or refresh the signed-in user's profile.

    The web client calls this after every sign-in. The user ID always comes
    from the session token.

    Example:
        POST /auth/user
        Authorization: Bearer ...

        Request:
        {"email": "ada@example.com", "displayName": "Ada"}

        Response:
        {
            "success": true,
            "user": {"_id": "...", "displayName": "Ada", "createdAt": "..."}
        }
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to register",
        )

    request = request or UpsertUserAPIRequest()
    try:
        return await upsert_user_use_case.execute(
            UpsertUserRequest(
                user_id=payload.user_id,
                email=request.email or payload.email,
                display_name=request.display_name or payload.name,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except BusinessRuleViolationError as e:
        logfire.warn("User registration rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error registering user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create or update user",
        )


@router.get("/profile", response_model=GetProfileResponse)
async def get_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> GetProfileResponse:
    """Get the signed-in user's profile. 404 until POST /auth/user was called."""
    user_id = require_user(jwt_service, auth_token, "read profile")

    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=str(user_id)))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    except Exception as e:
        logfire.error("Unexpected error fetching profile", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get user profile",
        )

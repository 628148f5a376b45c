"""Request dependencies shared by the routes."""

from fastapi import Cookie, Header, HTTPException, status

from topmeup.domain.service import JWTService
from topmeup.domain.value import UserId

BEARER_PREFIX = "bearer "


def auth_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Extract the session JWT from the request.

    The Authorization bearer header takes precedence over the auth_token
    cookie set by the web client.
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token


def require_user(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> UserId:
    """Resolve the caller of a mutation, or answer 401."""
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id

"""Session token helpers.

Tokens are HS256 JWTs minted by the identity bridge in front of this API.
The claims mirror an identity-provider ID token: ``uid`` is the TopMeUp
user ID, ``name`` the display name at sign-in time.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from topmeup.config import AuthSettings

REQUIRED_CLAIMS = ["uid", "exp", "iat"]


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    uid: str
    name: str | None = None
    email: str | None = None
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> str:
        return self.uid


class JWTError(Exception):
    """Token could not be decoded or is no longer valid."""

    pass


def create_token(
    user_id: str,
    display_name: str,
    settings: AuthSettings,
    email: str | None = None,
) -> str:
    """Mint a session token (used by the identity bridge and by tests).

    Args:
        user_id: TopMeUp user ID
        display_name: Display name at sign-in time
        settings: Authentication settings
        email: Optional email claim

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "uid": user_id,
        "name": display_name,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    if email:
        claims["email"] = email
    if settings.jwt_audience:
        claims["aud"] = settings.jwt_audience
    if settings.jwt_issuer:
        claims["iss"] = settings.jwt_issuer

    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a session token and return its claims.

    Raises:
        JWTError: If the token is malformed, expired, signed with another
            key, or lacks a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.PyJWTError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError:
        raise JWTError("Invalid token claims")

"""Viewer identification from session tokens."""

from uuid import UUID

import logfire

from topmeup.config import AuthSettings
from topmeup.domain.value import UserId
from topmeup.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Turns session tokens into user IDs.

    Reads treat a bad token as an anonymous viewer; mutations treat it as
    missing authentication. Neither path raises out of this service.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and return its claims.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Session token rejected", error=str(e))
                raise

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Return the claims of a valid token whose uid is a user ID.

        Args:
            token: Session token from the request, if any

        Returns:
            Token claims, or None for a missing or unusable token
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            UUID(payload.user_id)
            return payload
        except (JWTError, ValueError) as e:
            logfire.debug("Treating request as anonymous", error=str(e))
            return None

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the viewer of a request.

        Args:
            token: Session token from the request, if any

        Returns:
            User ID if the token is valid and names a user, None otherwise
        """
        payload = self.get_payload_from_token(token)
        return UserId(UUID(payload.user_id)) if payload else None

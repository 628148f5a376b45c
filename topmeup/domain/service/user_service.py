"""User domain service."""

from dataclasses import dataclass
from datetime import datetime

import logfire

from topmeup.domain.error import BusinessRuleViolationError, NotFoundError
from topmeup.domain.model import User
from topmeup.domain.repository import UserRepository
from topmeup.domain.value import DisplayName, UserId

from .base import Service


@dataclass
class AuthorIdentity:
    """Public identity shown next to a comment."""

    id: UserId
    display_name: DisplayName


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a registered user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If the user never registered
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def upsert_user(
        self, user_id: UserId, email: str, display_name: DisplayName
    ) -> User:
        """Create the user's profile on first sign-in, refresh it afterwards.

        Args:
            user_id: ID carried by the session token
            email: Email address reported by the identity provider
            display_name: Public name

        Returns:
            The stored user

        Raises:
            BusinessRuleViolationError: If the email belongs to another user
            ValueError: If the email is malformed
        """
        with logfire.span("user_service.upsert_user", user_id=str(user_id)):
            owner = await self.user_repository.find_by_email(email.strip())
            if owner and owner.id != user_id:
                logfire.warn(
                    "Email already registered to another user",
                    user_id=str(user_id),
                    owner_id=str(owner.id),
                )
                raise BusinessRuleViolationError("Email is already registered")

            existing = await self.user_repository.find_by_id(user_id)
            if existing:
                user = User.model_validate(
                    {
                        **existing.model_dump(),
                        "email": email,
                        "display_name": display_name,
                        "updated_at": datetime.now(),
                    }
                )
                logfire.info("User profile refreshed", user_id=str(user_id))
            else:
                user = User(id=user_id, email=email, display_name=display_name)
                logfire.info("User registered", user_id=str(user_id))

            return await self.user_repository.save(user)

    async def resolve_identities(
        self, user_ids: list[UserId]
    ) -> dict[str, AuthorIdentity]:
        """Resolve author identities in one bulk lookup.

        Users that no longer exist are left out of the map; callers render
        them as unknown authors.

        Args:
            user_ids: Author IDs, duplicates allowed

        Returns:
            Identities keyed by stringified user ID
        """
        unique_ids = set(user_ids)
        with logfire.span(
            "user_service.resolve_identities", requested=len(unique_ids)
        ):
            if not unique_ids:
                return {}

            users = await self.user_repository.find_by_ids(unique_ids)
            identities = {
                str(user.id): AuthorIdentity(id=user.id, display_name=user.display_name)
                for user in users
            }

            missing = len(unique_ids) - len(identities)
            if missing:
                logfire.info("Some comment authors no longer exist", missing=missing)
            return identities

"""User aggregate root.

Users sign in through the external identity provider; this service only
stores the profile it needs to attribute lists and comments.
"""

from datetime import datetime

from pydantic import Field, field_validator

from topmeup.domain.model.common import DomainModel
from topmeup.domain.value import DisplayName, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    display_name: DisplayName
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Store emails trimmed and lowercased."""
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("Invalid email address")
        return v

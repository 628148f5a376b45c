"""User shapes shared by the user use case responses."""

from datetime import datetime

from pydantic import Field

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.model import User


class UserView(ResponseModel):
    """Public profile of a user."""

    id: str = Field(alias="_id")
    display_name: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            display_name=user.display_name.root,
            created_at=user.created_at,
        )

"""Domain model entities for TopMeUp."""

from topmeup.domain.model.comment import Comment
from topmeup.domain.model.top_list import TopList
from topmeup.domain.model.user import User

__all__ = [
    "User",
    "TopList",
    "Comment",
]

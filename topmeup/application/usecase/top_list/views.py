"""List shapes shared by the list use case responses."""

from datetime import datetime

from pydantic import Field

from topmeup.application.usecase.base import ResponseModel
from topmeup.domain.model import TopList
from topmeup.domain.value import Category, ListItem


class ListItemView(ResponseModel):
    """One ranked entry of a list."""

    external_id: str
    title: str
    position: int
    category: Category
    poster_url: str | None = None
    year: int | None = None
    artist: str | None = None
    genres: list[str] = []
    rating: float | None = None
    description: str | None = None

    @classmethod
    def from_domain(cls, item: ListItem) -> "ListItemView":
        return cls(**item.model_dump())


class TopListView(ResponseModel):
    """A top list with its items and counters."""

    id: str = Field(alias="_id")
    user_id: str
    title: str
    category: Category
    description: str | None
    items: list[ListItemView]
    is_public: bool
    likes_count: int
    comments_count: int
    views_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, top_list: TopList) -> "TopListView":
        return cls(
            id=str(top_list.id),
            user_id=str(top_list.user_id),
            title=top_list.title,
            category=top_list.category,
            description=top_list.description,
            items=[ListItemView.from_domain(item) for item in top_list.items],
            is_public=top_list.is_public,
            likes_count=top_list.likes_count,
            comments_count=top_list.comments_count,
            views_count=top_list.views_count,
            created_at=top_list.created_at,
            updated_at=top_list.updated_at,
        )

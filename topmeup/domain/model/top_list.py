"""Top list aggregate root.

A top list ranks up to ten movies, albums or games. Lists carry
denormalized counters (likes, comments, views) that are maintained by the
services mutating the related records.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from topmeup.domain.error import NotFoundError
from topmeup.domain.model.common import DomainModel
from topmeup.domain.value import Category, ListId, ListItem, UserId

MAX_LIST_ITEMS = 10


class TopList(DomainModel):
    """Top list aggregate root.

    Business rules:
    - At most ten items, each with a unique external ID and position
    - Every item belongs to the list's category
    - Items are kept ordered by position

    Mutators return a new, revalidated list with a fresh updated_at.
    """

    id: ListId
    user_id: UserId
    title: str = Field(min_length=1, max_length=100)
    category: Category
    description: Optional[str] = Field(default=None, max_length=500)
    items: tuple[ListItem, ...] = ()
    is_public: bool = False
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    views_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_items(self) -> "TopList":
        """Validate item count, uniqueness and category."""
        if len(self.items) > MAX_LIST_ITEMS:
            raise ValueError(f"List cannot have more than {MAX_LIST_ITEMS} items")

        external_ids = [item.external_id for item in self.items]
        if len(set(external_ids)) != len(external_ids):
            raise ValueError("Item already exists in the list")

        positions = [item.position for item in self.items]
        if len(set(positions)) != len(positions):
            raise ValueError("Item positions must be unique")

        for item in self.items:
            if item.category != self.category:
                raise ValueError("Item category must match list category")
        return self

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def _changed(self, **changes: Any) -> "TopList":
        if "items" in changes:
            changes["items"] = tuple(
                sorted(changes["items"], key=lambda item: item.position)
            )
        return TopList.model_validate(
            {**dict(self), **changes, "updated_at": datetime.now()}
        )

    def _find_item(self, external_id: str) -> ListItem:
        for item in self.items:
            if item.external_id == external_id:
                return item
        raise NotFoundError("Item", external_id)

    def with_details(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        is_public: Optional[bool] = None,
        items: Optional[list[ListItem]] = None,
        clear_description: bool = False,
    ) -> "TopList":
        """Apply an edit; fields left as None keep their current value."""
        changes: dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if description is not None or clear_description:
            changes["description"] = description
        if is_public is not None:
            changes["is_public"] = is_public
        if items is not None:
            changes["items"] = items
        return self._changed(**changes)

    def with_item_added(self, item: ListItem) -> "TopList":
        """Insert an item at its position, pushing later items down one place.

        Raises:
            ValueError: If the item is a duplicate, the list is full, or the
                item belongs to another category
        """
        if any(i.external_id == item.external_id for i in self.items):
            raise ValueError("Item already exists in the list")
        if len(self.items) >= MAX_LIST_ITEMS:
            raise ValueError(f"List is full (max {MAX_LIST_ITEMS} items)")
        if item.category != self.category:
            raise ValueError("Item category must match list category")

        shifted = [
            i.model_copy(update={"position": i.position + 1})
            if i.position >= item.position
            else i
            for i in self.items
        ]
        items = sorted([*shifted, item], key=lambda i: i.position)
        if items[-1].position > MAX_LIST_ITEMS:
            # No room past the end; close the gaps instead
            items = _renumbered(items)
        return self._changed(items=items)

    def with_item_updated(
        self, external_id: str, position: Optional[int] = None, **metadata: Any
    ) -> "TopList":
        """Move an item and/or refresh its cached metadata.

        Moving onto an occupied position swaps the two items.

        Raises:
            NotFoundError: If no item has that external ID
        """
        current = self._find_item(external_id)
        updated = current.model_copy(update=metadata)
        items = [i for i in self.items if i.external_id != external_id]

        if position is not None and position != current.position:
            updated = updated.model_copy(update={"position": position})
            items = [
                i.model_copy(update={"position": current.position})
                if i.position == position
                else i
                for i in items
            ]
        return self._changed(items=[ListItem.model_validate(dict(updated)), *items])

    def with_item_removed(self, external_id: str) -> "TopList":
        """Remove an item and renumber the rest 1..n.

        Raises:
            NotFoundError: If no item has that external ID
        """
        self._find_item(external_id)
        remaining = [i for i in self.items if i.external_id != external_id]
        return self._changed(items=_renumbered(remaining))

    def with_items_reordered(self, positions: dict[str, int]) -> "TopList":
        """Assign new positions by external ID; unknown IDs are ignored.

        Raises:
            ValueError: If the result has clashing positions
        """
        items = [
            i.model_copy(update={"position": positions[i.external_id]})
            if i.external_id in positions
            else i
            for i in self.items
        ]
        return self._changed(items=[ListItem.model_validate(dict(i)) for i in items])


def _renumbered(items: list[ListItem]) -> list[ListItem]:
    ordered = sorted(items, key=lambda i: i.position)
    return [i.model_copy(update={"position": n}) for n, i in enumerate(ordered, 1)]

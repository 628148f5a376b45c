"""Comment thread domain service.

Reads one page of a list's discussion:

1. A page of top-level comments, newest first, keyed by a descending-ID
   cursor.
2. Every reply below those comments, loaded one depth level per query.
3. An in-memory forest built from the flat reply set, oldest reply first
   under each parent.

Identity resolution lives in UserService; the use case stitches the steps
together.
"""

from collections import defaultdict
from dataclasses import dataclass

import logfire

from topmeup.config import CommentSettings
from topmeup.domain.model.comment import Comment
from topmeup.domain.repository import CommentRepository
from topmeup.domain.value import CommentId, ListId, PageCursor, UserId

from .base import Service
from .user_service import AuthorIdentity


@dataclass
class RootPage:
    """One page of top-level comments."""

    comments: list[Comment]
    has_next: bool
    next_cursor: PageCursor | None


@dataclass
class CommentNode:
    """Node in a list's comment forest.

    Carries the comment, its resolved author (None when the account no
    longer exists), whether the viewer liked it, and its direct replies.
    """

    comment: Comment
    author: AuthorIdentity | None
    user_has_liked: bool
    replies: list["CommentNode"]


class CommentThreadService(Service):
    """Domain service for reading threaded comments."""

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment thread service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (page bounds, deleted placeholder)
        """
        self.comment_repository = comment_repository
        self.settings = settings

    def clamp_limit(self, limit: int | None) -> int:
        """Bound a requested page size to [1, max_page_size].

        Args:
            limit: Requested page size (None for the default)

        Returns:
            Page size to use
        """
        if limit is None:
            return self.settings.default_page_size
        return max(1, min(limit, self.settings.max_page_size))

    async def fetch_root_page(
        self,
        list_id: ListId,
        limit: int,
        cursor: PageCursor | None = None,
    ) -> RootPage:
        """Fetch one page of top-level comments, newest first.

        One extra row is requested to learn whether another page exists
        without a separate count query.

        Args:
            list_id: List ID
            limit: Page size
            cursor: Cursor returned with the previous page, if any

        Returns:
            The page of root comments and the cursor for the next one
        """
        with logfire.span(
            "comment_thread_service.fetch_root_page",
            list_id=str(list_id),
            limit=limit,
            cursor=str(cursor) if cursor else None,
        ):
            candidates = await self.comment_repository.find_roots(
                list_id=list_id,
                limit=limit + 1,
                before=cursor.comment_id if cursor else None,
            )

            if len(candidates) > limit:
                comments = candidates[:limit]
                page = RootPage(
                    comments=comments,
                    has_next=True,
                    next_cursor=PageCursor.after(comments[-1].id),
                )
            else:
                page = RootPage(comments=candidates, has_next=False, next_cursor=None)

            logfire.info(
                "Root comments fetched",
                list_id=str(list_id),
                count=len(page.comments),
                has_next=page.has_next,
            )
            return page

    async def load_replies(self, parent_ids: list[CommentId]) -> list[Comment]:
        """Load every reply below the given comments, at any depth.

        Breadth-first: each iteration fetches the direct children of the
        current frontier and makes them the next frontier, until a level
        comes back empty. Results keep fetch order (level by level,
        ascending ID within a level).

        Args:
            parent_ids: IDs of the comments whose descendants are wanted

        Returns:
            Flat list of all descendants, each exactly once
        """
        with logfire.span(
            "comment_thread_service.load_replies", root_count=len(parent_ids)
        ):
            replies: list[Comment] = []
            seen: set[CommentId] = set(parent_ids)
            frontier = list(parent_ids)
            depth = 0

            while frontier:
                children = await self.comment_repository.find_children(frontier)
                children = [c for c in children if c.id not in seen]
                if not children:
                    break

                depth += 1
                seen.update(c.id for c in children)
                replies.extend(children)
                frontier = [c.id for c in children]

            logfire.info("Replies loaded", count=len(replies), depth=depth)
            return replies

    def build_tree(
        self,
        roots: list[Comment],
        replies: list[Comment],
        identities: dict[str, AuthorIdentity],
        viewer_id: UserId | None = None,
    ) -> list[CommentNode]:
        """Assemble the comment forest for a page.

        Replies are grouped by parent once, then each root is expanded
        recursively. Roots keep their given order (newest first); siblings
        are ordered by ascending ID (oldest first).

        Args:
            roots: Top-level comments of the page, in display order
            replies: Flat set of all loaded replies
            identities: Author identities keyed by stringified user ID
            viewer_id: Requesting user (None for anonymous viewers)

        Returns:
            One node per root with replies nested to full depth
        """
        children_by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
        for reply in replies:
            children_by_parent[reply.parent_comment_id].append(reply)
        for siblings in children_by_parent.values():
            siblings.sort(key=lambda c: c.id)

        def build_node(comment: Comment) -> CommentNode:
            if comment.is_deleted:
                comment = comment.model_copy(
                    update={"content": self.settings.deleted_placeholder}
                )
            return CommentNode(
                comment=comment,
                author=identities.get(str(comment.user_id)),
                user_has_liked=comment.liked_by(viewer_id),
                replies=[
                    build_node(child) for child in children_by_parent.get(comment.id, [])
                ],
            )

        return [build_node(root) for root in roots]

    async def count_comments(self, list_id: ListId) -> int:
        """Count all comments of a list, replies and deleted ones included.

        Args:
            list_id: List ID

        Returns:
            Total number of comments
        """
        with logfire.span(
            "comment_thread_service.count_comments", list_id=str(list_id)
        ):
            return await self.comment_repository.count_by_list(list_id)

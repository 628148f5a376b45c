"""PostgreSQL implementation of Comment repository."""

from collections.abc import Collection
from typing import List, Optional

from sqlalchemy import and_, desc, exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from topmeup.domain.model import Comment
from topmeup.domain.repository import CommentRepository
from topmeup.domain.value import CommentId, ListId
from topmeup.persistence.mappers import comment_to_dict, row_to_comment
from topmeup.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_roots(
        self,
        list_id: ListId,
        limit: int,
        before: Optional[CommentId] = None,
    ) -> List[Comment]:
        """Find eligible top-level comments of a list, newest first."""
        replies = comments_table.alias("replies")
        has_reply = exists().where(replies.c.parent_comment_id == comments_table.c.id)

        stmt = select(comments_table).where(
            and_(
                comments_table.c.list_id == list_id,
                comments_table.c.parent_comment_id.is_(None),
                or_(comments_table.c.is_deleted.is_(False), has_reply),
            )
        )
        if before is not None:
            stmt = stmt.where(comments_table.c.id < before)

        stmt = stmt.order_by(desc(comments_table.c.id)).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_children(self, parent_ids: Collection[CommentId]) -> List[Comment]:
        """Find direct replies of any of the given comments, oldest first."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id.in_(list(parent_ids)))
            .order_by(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_list(self, list_id: ListId) -> int:
        """Count every comment of a list, deleted or not."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.list_id == list_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete_by_list(self, list_id: ListId) -> int:
        """Hard delete every comment of a list."""
        stmt = comments_table.delete().where(comments_table.c.list_id == list_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Inserts return the row so the database-allocated ID comes back.
        """
        comment_dict = comment_to_dict(comment)

        if comment.id is None:
            stmt = comments_table.insert().values(**comment_dict).returning(comments_table)
        else:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
                .returning(comments_table)
            )

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else comment

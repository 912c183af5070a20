"""SQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Comment
from ballot.domain.repository import CommentRepository
from ballot.domain.value import CommentId
from ballot.persistence.mappers import comment_to_dict, row_to_comment
from ballot.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return comment.model_copy(
            update={"id": CommentId(result.inserted_primary_key[0])}
        )

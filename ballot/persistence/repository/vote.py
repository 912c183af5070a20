"""SQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ballot.domain.model import Vote
from ballot.domain.repository import VoteRepository
from ballot.domain.value import VotableRef, VoteId
from ballot.persistence.mappers import row_to_vote, vote_to_dict
from ballot.persistence.tables import votes_table


def _targets(target: VotableRef):
    return and_(
        votes_table.c.votable_type == target.votable_type.value,
        votes_table.c.votable_id == target.votable_id,
    )


class SqlVoteRepository(VoteRepository):
    """SQL implementation of VoteRepository.

    Uniqueness is enforced by the ``unique_vote`` constraint.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs inside a SAVEPOINT so a unique constraint violation rolls back
        only this insert and leaves the surrounding transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        vote_id = VoteId(result.inserted_primary_key[0])
        return vote.model_copy(update={"id": vote_id})

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_votable(self, target: VotableRef) -> int:
        """Count votes on a specific item."""
        stmt = select(func.count()).select_from(votes_table).where(_targets(target))
        result = await self.session.execute(stmt)
        return result.scalar_one()

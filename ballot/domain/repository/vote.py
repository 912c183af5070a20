"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ballot.domain.model.vote import Vote
from ballot.domain.value import VotableRef, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Implementations must enforce uniqueness of
    (user_id, votable_type, votable_id) themselves; callers rely on it
    instead of checking first.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote and assign its id.

        The existence check and the insert happen as one atomic step.

        Args:
            vote: The vote to save (``id`` is ignored)

        Returns:
            The saved vote with its id set

        Raises:
            IntegrityError: If the user already voted on this item
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_votable(self, target: VotableRef) -> int:
        """Count votes on a specific item.

        Args:
            target: The voted item

        Returns:
            Number of votes
        """
        pass

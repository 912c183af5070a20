"""In-memory vote repository for testing."""

import threading
from itertools import count
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ballot.domain.model.vote import Vote
from ballot.domain.repository.vote import VoteRepository
from ballot.domain.value import UserId, VotableRef, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Mirrors the ``unique_vote`` constraint with a keyed index. Every method
    holds the lock, so callers on other threads never see the two dicts
    out of step or mid-resize.
    """

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}
        self._by_key: dict[tuple[UserId, VotableRef], VoteId] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        with self._lock:
            return self._votes.get(vote_id)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        key = (vote.user_id, vote.target)
        with self._lock:
            if key in self._by_key:
                raise IntegrityError("Duplicate vote", None, Exception("unique_vote"))

            saved = vote.model_copy(update={"id": VoteId(next(self._ids))})
            self._votes[saved.id] = saved
            self._by_key[key] = saved.id
        return saved

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        with self._lock:
            vote = self._votes.pop(vote_id, None)
            if vote is None:
                return False
            del self._by_key[(vote.user_id, vote.target)]
        return True

    async def count_by_votable(self, target: VotableRef) -> int:
        """Count votes for a votable item."""
        with self._lock:
            votes = list(self._votes.values())
        return sum(1 for v in votes if v.target == target)

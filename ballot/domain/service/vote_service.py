"""Vote domain service."""

from typing import Optional

import logfire
from sqlalchemy.exc import IntegrityError

from ballot.domain.error import DuplicateVoteError, NotFoundError, VoteOwnershipError
from ballot.domain.model.vote import Votable, Vote
from ballot.domain.repository import VoteRepository
from ballot.domain.value import UserId, VoteId

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(self, user_id: UserId, target: Votable) -> Vote:
        """Cast a vote by a user on an article or comment.

        There is no existence check before the insert: the repository
        rejects a second vote for the same (user, target) atomically, which
        keeps concurrent attempts from both succeeding.

        Args:
            user_id: Voting user's ID
            target: Already located article or comment

        Returns:
            Created vote with its id

        Raises:
            DuplicateVoteError: If the user already voted on the target
        """
        ref = target.ref
        with logfire.span(
            "vote_service.cast_vote",
            user_id=user_id,
            votable_type=ref.votable_type.value,
            votable_id=ref.votable_id,
        ):
            vote = Vote.for_target(user_id, ref)

            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate vote attempt",
                    user_id=user_id,
                    votable_type=ref.votable_type.value,
                    votable_id=ref.votable_id,
                )
                raise DuplicateVoteError()

            logfire.info("Vote cast", vote_id=saved_vote.id, user_id=user_id)
            return saved_vote

    async def delete_vote(self, requester_id: UserId, vote_id: VoteId) -> Vote:
        """Delete a vote on behalf of the user who cast it.

        Args:
            requester_id: Authenticated user asking for the deletion
            vote_id: Vote to delete

        Returns:
            The vote that was removed

        Raises:
            NotFoundError: If the vote does not exist
            VoteOwnershipError: If the vote belongs to someone else
        """
        with logfire.span(
            "vote_service.delete_vote", vote_id=vote_id, requester_id=requester_id
        ):
            vote = await self.get_vote(vote_id)
            if vote is None:
                logfire.info("Delete of missing vote", vote_id=vote_id)
                raise NotFoundError("Vote", str(vote_id))

            if not vote.is_owned_by(requester_id):
                logfire.warn(
                    "Delete of another user's vote",
                    vote_id=vote_id,
                    owner_id=vote.user_id,
                    requester_id=requester_id,
                )
                raise VoteOwnershipError()

            deleted = await self.vote_repository.delete(vote_id)
            if not deleted:
                # Removed by a concurrent request after the lookup
                logfire.info("Vote vanished before delete", vote_id=vote_id)
                raise NotFoundError("Vote", str(vote_id))

            logfire.info("Vote deleted", vote_id=vote_id, user_id=requester_id)
            return vote

    async def get_vote(self, vote_id: VoteId) -> Optional[Vote]:
        """Get a vote by ID.

        Args:
            vote_id: Vote ID

        Returns:
            The vote if it exists, None otherwise
        """
        return await self.vote_repository.find_by_id(vote_id)

    async def count_votes(self, target: Votable) -> int:
        """Count the votes on an article or comment.

        Args:
            target: Already located article or comment

        Returns:
            Number of live votes
        """
        return await self.vote_repository.count_by_votable(target.ref)

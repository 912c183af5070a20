"""Cast vote use case."""

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import TargetService, VoteService
from ballot.domain.value import UserId, VotableType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: int
    user_id: int  # From the authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    id: int


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on an article or comment."""

    def __init__(
        self, target_service: TargetService, vote_service: VoteService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            target_service: Target domain service
            vote_service: Vote domain service
        """
        self.target_service = target_service
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Id of the new vote

        Raises:
            NotFoundError: If the target does not exist
            DuplicateVoteError: If the user already voted on the target
        """
        target = await self.target_service.locate(
            request.votable_type, request.votable_id
        )
        vote = await self.vote_service.cast_vote(UserId(request.user_id), target)
        return CastVoteResponse(id=vote.id)

"""Count votes use case."""

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import TargetService, VoteService
from ballot.domain.value import VotableType


class CountVotesRequest(BaseModel):
    """Count votes request."""

    votable_type: VotableType
    votable_id: int


class CountVotesResponse(BaseModel):
    """Count votes response."""

    votable_type: VotableType
    votable_id: int
    count: int


class CountVotesUseCase(BaseUseCase[CountVotesRequest, CountVotesResponse]):
    """Use case for reading the vote count of an article or comment."""

    def __init__(
        self, target_service: TargetService, vote_service: VoteService
    ) -> None:
        self.target_service = target_service
        self.vote_service = vote_service

    async def execute(self, request: CountVotesRequest) -> CountVotesResponse:
        """Execute count votes flow.

        Raises:
            NotFoundError: If the target does not exist
        """
        target = await self.target_service.locate(
            request.votable_type, request.votable_id
        )
        count = await self.vote_service.count_votes(target)
        return CountVotesResponse(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            count=count,
        )

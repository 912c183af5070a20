"""Delete vote use case."""

from pydantic import BaseModel

from ballot.application.usecase.base import BaseUseCase
from ballot.domain.service import VoteService
from ballot.domain.value import UserId, VoteId


class DeleteVoteRequest(BaseModel):
    """Delete vote request."""

    vote_id: int
    user_id: int  # From the authenticated user


class VoteDeleted(BaseModel):
    """Successful deletion. Carries nothing the client gets to see."""

    vote_id: int


class DeleteVoteUseCase(BaseUseCase[DeleteVoteRequest, VoteDeleted]):
    """Use case for retracting one's own vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize delete vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: DeleteVoteRequest) -> VoteDeleted:
        """Execute delete vote flow.

        Raises:
            NotFoundError: If the vote does not exist
            VoteOwnershipError: If the vote belongs to another user
        """
        await self.vote_service.delete_vote(
            UserId(request.user_id), VoteId(request.vote_id)
        )
        return VoteDeleted(vote_id=request.vote_id)

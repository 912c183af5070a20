"""Application layer DI providers."""

from dishka import Scope, provide

from ballot.application.usecase.vote import (
    CastVoteUseCase,
    CountVotesUseCase,
    DeleteVoteUseCase,
)
from ballot.domain.service import TargetService, VoteService
from ballot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, target_service: TargetService, vote_service: VoteService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            target_service=target_service, vote_service=vote_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_vote_use_case(self, vote_service: VoteService) -> DeleteVoteUseCase:
        """Provide delete vote use case."""
        return DeleteVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_count_votes_use_case(
        self, target_service: TargetService, vote_service: VoteService
    ) -> CountVotesUseCase:
        """Provide count votes use case."""
        return CountVotesUseCase(
            target_service=target_service, vote_service=vote_service
        )

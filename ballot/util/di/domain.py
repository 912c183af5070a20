"""Domain layer DI providers."""

from dishka import Scope, provide

from ballot.domain.repository import (
    ArticleRepository,
    CommentRepository,
    TokenRepository,
    UserRepository,
    VoteRepository,
)
from ballot.domain.service import CredentialService, TargetService, VoteService
from ballot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_credential_service(
        self, token_repository: TokenRepository, user_repository: UserRepository
    ) -> CredentialService:
        """Provide credential domain service."""
        return CredentialService(
            token_repository=token_repository, user_repository=user_repository
        )

    @provide
    def get_target_service(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
    ) -> TargetService:
        """Provide target domain service."""
        return TargetService(
            article_repository=article_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)

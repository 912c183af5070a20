"""Target domain service.

Turns a (type, id) pair from a route into the article or comment it names.
"""

import logfire

from ballot.domain.error import NotFoundError
from ballot.domain.model.vote import Votable
from ballot.domain.repository import ArticleRepository, CommentRepository
from ballot.domain.value import ArticleId, CommentId, VotableType

from .base import Service


class TargetService(Service):
    """Domain service locating vote targets."""

    def __init__(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize target service.

        Args:
            article_repository: Article repository
            comment_repository: Comment repository
        """
        self.article_repository = article_repository
        self.comment_repository = comment_repository

    async def locate(self, votable_type: VotableType, votable_id: int) -> Votable:
        """Find the article or comment a vote would target.

        Args:
            votable_type: Kind of target, fixed by the route
            votable_id: Target id from the path

        Returns:
            The article or comment

        Raises:
            NotFoundError: If no such target exists
        """
        with logfire.span(
            "target_service.locate",
            votable_type=votable_type.value,
            votable_id=votable_id,
        ):
            target: Votable | None = None
            # Storage ids start at 1
            if votable_id > 0:
                if votable_type == VotableType.ARTICLE:
                    target = await self.article_repository.find_by_id(
                        ArticleId(votable_id)
                    )
                else:  # VotableType.COMMENT
                    target = await self.comment_repository.find_by_id(
                        CommentId(votable_id)
                    )

            if target is None:
                logfire.info(
                    "Vote target not found",
                    votable_type=votable_type.value,
                    votable_id=votable_id,
                )
                raise NotFoundError(votable_type.value.capitalize(), str(votable_id))

            return target

"""Article entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel, utcnow
from ballot.domain.value import ArticleId, UserId, VotableRef, VotableType


class Article(DomainModel):
    """Article that readers can vote on."""

    votable_type: ClassVar[VotableType] = VotableType.ARTICLE

    id: Optional[ArticleId] = None
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def ref(self) -> VotableRef:
        """Vote target reference for this article."""
        if self.id is None:
            raise ValueError("Article has not been saved")
        return VotableRef(votable_type=self.votable_type, votable_id=self.id)

"""Comment entity."""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel, utcnow
from ballot.domain.value import ArticleId, CommentId, UserId, VotableRef, VotableType


class Comment(DomainModel):
    """Comment on an article. Comments receive votes independently."""

    votable_type: ClassVar[VotableType] = VotableType.COMMENT

    id: Optional[CommentId] = None
    article_id: ArticleId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def ref(self) -> VotableRef:
        """Vote target reference for this comment."""
        if self.id is None:
            raise ValueError("Comment has not been saved")
        return VotableRef(votable_type=self.votable_type, votable_id=self.id)

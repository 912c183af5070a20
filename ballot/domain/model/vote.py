"""Vote entity.

A vote records that one user endorsed one article or comment. Each user
can hold at most one vote per item.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import Field

from ballot.domain.model.article import Article
from ballot.domain.model.comment import Comment
from ballot.domain.model.common import DomainModel, utcnow
from ballot.domain.value import UserId, VotableRef, VotableType, VoteId

# Anything a vote can point at
Votable = Union[Article, Comment]


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by the storage unique constraint)
    - Never edited; removed only by the user who cast it
    - Polymorphic reference to the votable (article or comment)
    """

    id: Optional[VoteId] = None  # Assigned on save
    user_id: UserId
    votable_type: VotableType
    votable_id: int  # ArticleId or CommentId
    created_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def for_target(cls, user_id: UserId, target: VotableRef) -> "Vote":
        """Build an unsaved vote by ``user_id`` on ``target``."""
        return cls(
            user_id=user_id,
            votable_type=target.votable_type,
            votable_id=target.votable_id,
        )

    @property
    def target(self) -> VotableRef:
        """Reference to the voted item."""
        return VotableRef(votable_type=self.votable_type, votable_id=self.votable_id)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

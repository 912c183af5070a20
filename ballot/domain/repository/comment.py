"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ballot.domain.model.comment import Comment
from ballot.domain.value import CommentId


class CommentRepository(ABC):
    """Read access to comments, plus ``save`` for the owning subsystem."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its id set."""
        pass

"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from ballot.domain.model.comment import Comment
from ballot.domain.repository.comment import CommentRepository
from ballot.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment, assigning an id when it has none."""
        if comment.id is None:
            comment = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[comment.id] = comment
        return comment

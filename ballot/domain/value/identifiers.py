"""Strongly typed identifiers for ballot domain entities.

Ids are integers assigned by the storage layer. NewType keeps an
ArticleId from being passed where a VoteId is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
ArticleId = NewType("ArticleId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)

"""Domain model entities for ballot."""

from ballot.domain.model.article import Article
from ballot.domain.model.comment import Comment
from ballot.domain.model.token import Token
from ballot.domain.model.user import User
from ballot.domain.model.vote import Votable, Vote

__all__ = [
    "User",
    "Token",
    "Article",
    "Comment",
    "Votable",
    "Vote",
]

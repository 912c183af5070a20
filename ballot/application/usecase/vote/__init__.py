"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .count_votes import CountVotesRequest, CountVotesResponse, CountVotesUseCase
from .delete_vote import DeleteVoteRequest, DeleteVoteUseCase, VoteDeleted

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "CountVotesRequest",
    "CountVotesResponse",
    "CountVotesUseCase",
    "DeleteVoteRequest",
    "DeleteVoteUseCase",
    "VoteDeleted",
]

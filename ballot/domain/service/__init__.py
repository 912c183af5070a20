"""Domain services."""

from .base import Service
from .credential_service import CredentialService
from .target_service import TargetService
from .vote_service import VoteService

__all__ = [
    "CredentialService",
    "Service",
    "TargetService",
    "VoteService",
]

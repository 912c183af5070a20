"""User entity.

Users are owned by the account subsystem. This service only reads them to
attribute votes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel, utcnow
from ballot.domain.value import Handle, UserId


class User(DomainModel):
    """Authenticated principal."""

    id: Optional[UserId] = None
    handle: Handle
    created_at: datetime = Field(default_factory=utcnow)

"""Credential token entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ballot.domain.model.common import DomainModel, utcnow
from ballot.domain.value import TokenValue, UserId


class Token(DomainModel):
    """Opaque credential issued to a user.

    A token without ``expires_at`` never expires.
    """

    value: TokenValue
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: Optional[datetime] = None

    def is_valid_at(self, moment: datetime) -> bool:
        """Whether the token can still be used at ``moment``."""
        return self.expires_at is None or self.expires_at > moment

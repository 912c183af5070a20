"""Domain value objects for ballot."""

from enum import Enum

from pydantic import field_validator

from ballot.domain.value.common import RootValueObject, ValueObject


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    ARTICLE = "article"
    COMMENT = "comment"


class VotableRef(ValueObject):
    """Reference to a vote target: the (type, id) pair.

    This is the only thing the vote service needs to know about a target;
    two refs are equal exactly when they point at the same entity.
    """

    votable_type: VotableType
    votable_id: int


class Handle(RootValueObject[str]):
    """Human-readable user handle."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


class TokenValue(RootValueObject[str]):
    """Opaque credential token presented by a client."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not blank."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Token must be 1-255 non-blank characters")
        return v

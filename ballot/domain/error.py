"""Domain layer errors.

Every error here is a terminal, caller-facing outcome. Messages of the
vote errors are part of the public API and must not change.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when a request carries no usable credential."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user acts on something they don't own."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateVoteError(BusinessRuleViolationError):
    """Raised when a user votes twice for the same item."""

    def __init__(self) -> None:
        super().__init__("You've already voted for this item")


class VoteOwnershipError(NotAuthorizedError):
    """Raised when a user tries to delete someone else's vote."""

    def __init__(self) -> None:
        super().__init__("You may not delete others' votes")

"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnsupportedMediaTypeError(InterfaceError):
    """Request did not declare a JSON body."""

    def __init__(self, message: str = "Content-Type must be application/json"):
        super().__init__(message)

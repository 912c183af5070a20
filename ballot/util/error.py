"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings describe something the application cannot run with."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be selected for a DI component."""

    def __init__(self, component: str, message: str):
        self.component = component
        super().__init__(f"{component}: {message}")

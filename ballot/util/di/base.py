"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal, Optional

from dishka import Provider

# Components that have an in-memory twin for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with swap metadata.

    A provider family that declares ``__mock_component__`` has one
    production and one mock subclass, told apart by ``__is_mock__``.
    Families without it are used as they are.
    """

    __mock_component__: ClassVar[Optional[Component]] = None
    __is_mock__: ClassVar[bool] = False


def component_of(provider: type[ProviderBase]) -> Optional[Component]:
    """Name of the swappable component ``provider`` belongs to, if any."""
    return getattr(provider, "__mock_component__", None)

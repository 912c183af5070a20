"""Dependency injection wiring.

``PROVIDERS`` lists one entry per provider family. Families marked with a
component name get their production or mock subclass picked at container
build time.
"""

from typing import Type

from ballot.util.di.application import ProdApplicationProvider
from ballot.util.di.base import Component, ProviderBase, component_of
from ballot.util.di.core import ProdConfigProvider
from ballot.util.di.domain import ProdDomainProvider
from ballot.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from ballot.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # swappable: "persistence"
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a family.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Want the in-memory implementation

    Returns:
        ``base`` itself when it has no implementations, otherwise the
        subclass whose ``__is_mock__`` matches ``use_mock``

    Raises:
        DependencyInjectionError: If the family lacks the wanted variant
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    raise DependencyInjectionError(
        component_of(base) or base.__name__,
        f"no {'mock' if use_mock else 'production'} implementation",
    )


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "component_of",
    "get_provider",
]

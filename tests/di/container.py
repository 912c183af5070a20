"""Test containers with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from ballot.util.di import PROVIDERS, Component, component_of, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where swappable components default to mocks.

    Settings come from the environment as in production; the harness
    points DATABASE__URL at a temporary SQLite file when persistence is
    unmocked.

    Args:
        unmock: Components that should use their production provider

    Raises:
        ValueError: If unmock names a component no provider declares

    Examples:
        # Everything in memory
        container = build_test_container()

        # Real SQL repositories
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = {component_of(family) for family in PROVIDERS} - {None}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for family in PROVIDERS:
        component = component_of(family)
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(family, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())

"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ballot.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with the production variant of every provider family."""
    providers = [get_provider(family)() for family in PROVIDERS]
    # Exposes the current Request to providers
    providers.append(FastapiProvider())
    return make_async_container(*providers)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``; each request opens a child scope."""
    setup_dishka(container, app)

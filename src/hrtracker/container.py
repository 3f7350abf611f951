"""Dependency injection container for the tracker."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .schemas.config import load_config
from .session import TrackerSession, local_now
from .storage import RosterRepository


class TrackerContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    clock = providers.Object(local_now)

    repository = providers.Factory(
        RosterRepository,
        path=config.storage.path,
    )

    # The model is loaded per command, so callers pass ``model=`` when
    # requesting a session.
    session = providers.Factory(
        TrackerSession,
        now_provider=clock,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> TrackerContainer:
    """Instantiate container with validated settings applied over defaults."""

    container = TrackerContainer()
    container.config.from_dict(load_config(settings).to_settings())
    return container

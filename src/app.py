"""Application composition root.

This module wires together configuration and the string store for the HTTP runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings
from src.store.memory import StringStore


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    store: StringStore


def create_app(settings: Settings) -> App:
    """Create the application container with an empty store."""

    return App(settings=settings, store=StringStore())

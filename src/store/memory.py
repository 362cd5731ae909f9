"""In-memory string store keyed by fingerprint.

Nothing survives the process. All access goes through a single `asyncio.Lock`, so handlers running
on the same event loop see consistent snapshots.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime

from src.analysis.analyzer import analyze, fingerprint
from src.analysis.schema import StoredString

logger = logging.getLogger(__name__)


class StoreError(LookupError):
    """Base class for store lookup failures."""


class DuplicateStringError(StoreError):
    """Raised when a string with the same fingerprint is already stored."""


class StringNotFoundError(StoreError):
    """Raised when no string with the requested fingerprint is stored."""


class StringStore:
    """Mapping from fingerprint to `StoredString`."""

    def __init__(self) -> None:
        self._items: dict[str, StoredString] = {}
        self._lock = asyncio.Lock()

    async def add(self, value: str) -> StoredString:
        """Analyze and store `value`.

        Raises:
            DuplicateStringError: If the same text is already stored.
        """

        properties = analyze(value)
        entry = StoredString(
            id=properties.fingerprint,
            value=value,
            properties=properties,
            created_at=datetime.now(UTC),
        )

        async with self._lock:
            if entry.id in self._items:
                raise DuplicateStringError(entry.id)
            self._items[entry.id] = entry

        logger.debug("stored id=%s length=%d", entry.id, properties.length)
        return entry

    async def get(self, value: str) -> StoredString:
        """Look up a stored string by its text (hashed, never compared raw).

        Raises:
            StringNotFoundError: If the text is not stored.
        """

        key = fingerprint(value)
        async with self._lock:
            entry = self._items.get(key)
        if entry is None:
            raise StringNotFoundError(key)
        return entry

    async def delete(self, value: str) -> None:
        """Remove a stored string by its text.

        Raises:
            StringNotFoundError: If the text is not stored.
        """

        key = fingerprint(value)
        async with self._lock:
            if self._items.pop(key, None) is None:
                raise StringNotFoundError(key)
        logger.debug("deleted id=%s", key)

    async def list_all(self) -> list[StoredString]:
        """Snapshot of all stored strings in insertion order."""

        async with self._lock:
            return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

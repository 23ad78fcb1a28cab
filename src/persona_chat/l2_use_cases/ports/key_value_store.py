"""Port: local key-value store for persisted records."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Abstract synchronous store of JSON-object records."""

    def load(self, key: str) -> dict | None:
        """Return the record at *key*, or None if absent or unreadable."""
        ...

    def save(self, key: str, value: dict) -> None:
        """Overwrite the record at *key*."""
        ...

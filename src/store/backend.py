"""Storage backend protocol.

Base stores depend on this structural interface rather than on
a concrete backend, so tests and callers can swap implementations.
"""

from __future__ import annotations

from typing import Protocol

from core.types import Value


class StorageBackend(Protocol):
    """Key/value slot storage consumed by base stores."""

    def get(self, key: str) -> Value | None:
        """Return the stored value, or None when the key is absent."""

    def set(self, key: str, value: Value) -> None:
        """Store a value under key, replacing any prior value."""

    def keys(self) -> tuple[str, ...]:
        """Return the keys that currently hold a value."""

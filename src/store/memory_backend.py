"""Process-local in-memory storage backend."""

from __future__ import annotations

from core.types import Value


class MemoryBackend:
    """Dictionary-backed storage backend.

    Values live only as long as the backend instance.
    """

    def __init__(self) -> None:
        self._values: dict[str, Value] = {}

    def get(self, key: str) -> Value | None:
        """Return the stored value or None."""
        return self._values.get(key)

    def set(self, key: str, value: Value) -> None:
        """Store value under key."""
        self._values[key] = value

    def keys(self) -> tuple[str, ...]:
        """Return stored keys in insertion order."""
        return tuple(self._values)

"""Terminal data source over a storage backend."""

from __future__ import annotations

from core.errors import NotFoundError, StrataConfigError, TypeMismatchError
from core.types import Value, value_kind
from store.backend import StorageBackend
from store.memory_backend import MemoryBackend


class BaseStore:
    """Non-transforming data source bound to one storage key.

    This is the end of every pipeline and the only stage that
    talks to a storage backend.
    """

    def __init__(self, key: str, backend: StorageBackend | None = None) -> None:
        if not key:
            raise StrataConfigError("Storage key must not be empty.")
        self._key = key
        self._backend = backend if backend is not None else MemoryBackend()

    @property
    def key(self) -> str:
        return self._key

    def write(self, value: Value) -> None:
        """Store value verbatim, replacing any prior value.

        Raises:
            TypeMismatchError: If value is neither text nor bytes.
        """
        if not isinstance(value, (str, bytes)):
            raise TypeMismatchError(
                f"Base store '{self._key}' received a {value_kind(value)} value: "
                "expected text or bytes."
            )
        self._backend.set(self._key, value)

    def read(self) -> Value:
        """Return the last written value.

        Raises:
            NotFoundError: If nothing was written for this key.
        """
        value = self._backend.get(self._key)
        if value is None:
            raise NotFoundError(
                f"No value stored for key '{self._key}'. Write a value before reading it."
            )
        return value

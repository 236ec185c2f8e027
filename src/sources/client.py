"""Python SDK for keyed pipeline operations.

This module builds pipelines from runtime configuration so callers can
write and read values by key without wiring backends by hand.
"""

from __future__ import annotations

from core.config import StrataConfig
from core.constants import BACKEND_MEMORY, LAYER_ENCODING, LAYER_ENCRYPTION
from core.types import LayerSpec, Value
from sources.base_store import BaseStore
from sources.data_source import DataSource
from sources.pipeline import compose_pipeline
from store.backend import StorageBackend
from store.json_file_backend import JsonFileBackend
from store.memory_backend import MemoryBackend


class StrataClient:
    """Primary SDK entry point for keyed pipelines."""

    def __init__(self, config: StrataConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or StrataConfig.from_env()
        self._backend = _build_backend(self._config)

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def pipeline(self, key: str, encryption_key: str | None = None) -> DataSource:
        """Build a pipeline for one storage key.

        Text is always encoded with the configured codec. When an
        encryption key is given, an encryption layer wraps the encoding.

        Args:
            key: Storage key.
            encryption_key: Optional cipher key.

        Returns:
            Outermost data source of the pipeline.
        """
        layers = [LayerSpec(kind=LAYER_ENCODING, encoding=self._config.text_encoding)]
        if encryption_key is not None:
            layers.append(
                LayerSpec(
                    kind=LAYER_ENCRYPTION,
                    encryption_key=encryption_key,
                    ciphertext_encoding=self._config.ciphertext_encoding,
                )
            )
        return compose_pipeline(BaseStore(key, self._backend), layers)

    def write(self, key: str, value: Value, encryption_key: str | None = None) -> None:
        """Write a value through the pipeline for key."""
        self.pipeline(key, encryption_key).write(value)

    def read(self, key: str, encryption_key: str | None = None) -> Value:
        """Read a value through the pipeline for key.

        Raises:
            NotFoundError: If nothing was written for key.
        """
        return self.pipeline(key, encryption_key).read()

    def keys(self) -> tuple[str, ...]:
        """Return stored keys from the configured backend."""
        return self._backend.keys()


def _build_backend(config: StrataConfig) -> StorageBackend:
    if config.backend == BACKEND_MEMORY:
        return MemoryBackend()
    return JsonFileBackend(config.data_root)

"""Pipeline composition.

This module stacks decorators around a base store from declarative
layer specs. Layers are applied innermost first, so the last spec is
the outermost transform: first on write, last on read. Value shapes
are not checked at composition time; a mismatched stack fails on
first use with TypeMismatchError.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import (
    DEFAULT_CIPHERTEXT_ENCODING,
    DEFAULT_TEXT_ENCODING,
    LAYER_ENCODING,
    LAYER_ENCRYPTION,
    SUPPORTED_LAYER_KINDS,
)
from core.errors import StrataConfigError
from core.logging_config import get_logger
from core.types import LayerSpec
from sources.base_store import BaseStore
from sources.data_source import DataSource
from sources.encoding_decorator import EncodingDecorator
from sources.encryption_decorator import EncryptionDecorator
from store.backend import StorageBackend

_LOGGER = get_logger(__name__)


def compose_pipeline(base: DataSource, layers: Sequence[LayerSpec]) -> DataSource:
    """Wrap a base source with decorators, innermost first.

    Args:
        base: Terminal data source.
        layers: Layer specs ordered from innermost to outermost.

    Returns:
        Outermost data source of the pipeline.

    Raises:
        StrataConfigError: If a layer kind is unknown or misconfigured.
        InvalidKeyError: If an encryption layer has an empty key.
    """
    source = base
    for layer in layers:
        source = _wrap(source, layer)
    _LOGGER.info("pipeline_composed", layers=list(describe_pipeline(source)))
    return source


def build_default_pipeline(
    key: str,
    encryption_key: str,
    backend: StorageBackend | None = None,
    encoding: str = DEFAULT_TEXT_ENCODING,
    ciphertext_encoding: str = DEFAULT_CIPHERTEXT_ENCODING,
) -> DataSource:
    """Build an encryption-over-encoding pipeline for one key.

    Args:
        key: Storage key.
        encryption_key: Non-empty cipher key.
        backend: Optional storage backend, in-memory when omitted.
        encoding: Codec of the encoding layer.
        ciphertext_encoding: Codec carrying cipher bytes as text.

    Returns:
        Outermost data source of the pipeline.
    """
    layers = (
        LayerSpec(kind=LAYER_ENCODING, encoding=encoding),
        LayerSpec(
            kind=LAYER_ENCRYPTION,
            encryption_key=encryption_key,
            ciphertext_encoding=ciphertext_encoding,
        ),
    )
    return compose_pipeline(BaseStore(key, backend), layers)


def describe_pipeline(source: DataSource) -> tuple[str, ...]:
    """Return layer names from outermost to the base store."""
    names: list[str] = []
    current: object = source
    while True:
        if isinstance(current, EncryptionDecorator):
            names.append(f"{LAYER_ENCRYPTION}:{current.ciphertext_encoding}")
        elif isinstance(current, EncodingDecorator):
            names.append(f"{LAYER_ENCODING}:{current.encoding}")
        elif isinstance(current, BaseStore):
            names.append(f"base_store:{current.key}")
            return tuple(names)
        else:
            names.append(type(current).__name__)
        inner = getattr(current, "inner", None)
        if inner is None:
            return tuple(names)
        current = inner


def _wrap(source: DataSource, layer: LayerSpec) -> DataSource:
    """Wrap one source with the decorator a layer spec names."""
    if layer.kind == LAYER_ENCODING:
        return EncodingDecorator(source, layer.encoding)
    if layer.kind == LAYER_ENCRYPTION:
        if layer.encryption_key is None:
            raise StrataConfigError(
                "Encryption layer requires an encryption key. Set encryption_key on the layer."
            )
        return EncryptionDecorator(source, layer.encryption_key, layer.ciphertext_encoding)
    raise StrataConfigError(
        f"Unsupported layer kind '{layer.kind}': "
        f"expected one of {', '.join(SUPPORTED_LAYER_KINDS)}."
    )

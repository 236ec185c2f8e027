"""Public SDK surface for Strata.

This module provides a stable import path for library users.
It re-exports the data sources, pipeline helpers, and error types.
"""

from __future__ import annotations

from core.config import StrataConfig
from core.errors import (
    DecodingError,
    EncodingError,
    InvalidKeyError,
    NotFoundError,
    StoreError,
    StrataConfigError,
    StrataError,
    TypeMismatchError,
)
from core.types import LayerSpec, Value
from sources.base_store import BaseStore
from sources.client import StrataClient
from sources.data_source import DataSource
from sources.encoding_decorator import EncodingDecorator
from sources.encryption_decorator import EncryptionDecorator
from sources.pipeline import build_default_pipeline, compose_pipeline, describe_pipeline
from store.json_file_backend import JsonFileBackend
from store.memory_backend import MemoryBackend
from transforms.xor_cipher import XorCipher, xor_transform

__all__ = [
    "BaseStore",
    "DataSource",
    "DecodingError",
    "EncodingDecorator",
    "EncodingError",
    "EncryptionDecorator",
    "InvalidKeyError",
    "JsonFileBackend",
    "LayerSpec",
    "MemoryBackend",
    "NotFoundError",
    "StoreError",
    "StrataClient",
    "StrataConfig",
    "StrataConfigError",
    "StrataError",
    "TypeMismatchError",
    "Value",
    "XorCipher",
    "build_default_pipeline",
    "compose_pipeline",
    "describe_pipeline",
    "xor_transform",
]

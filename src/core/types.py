"""Shared typed models.

This module defines the value union and the immutable layer model
shared by the store, sources, and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from core.constants import DEFAULT_CIPHERTEXT_ENCODING, DEFAULT_TEXT_ENCODING

Value = Union[str, bytes]


@dataclass(frozen=True)
class LayerSpec:
    """Declarative description of one pipeline decorator.

    Attributes:
        kind: Layer kind, ``encoding`` or ``encryption``.
        encoding: Codec for encoding layers.
        encryption_key: Cipher key for encryption layers.
        ciphertext_encoding: Codec carrying cipher bytes as text.
    """

    kind: str
    encoding: str = DEFAULT_TEXT_ENCODING
    encryption_key: str | None = None
    ciphertext_encoding: str = DEFAULT_CIPHERTEXT_ENCODING


def value_kind(value: object) -> str:
    """Return a short name for a value shape, used in error messages."""
    if isinstance(value, str):
        return "text"
    if isinstance(value, bytes):
        return "bytes"
    return type(value).__name__

"""Runtime configuration model for Strata.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from core.constants import (
    DEFAULT_BACKEND,
    DEFAULT_CIPHERTEXT_ENCODING,
    DEFAULT_DATA_ROOT,
    DEFAULT_TEXT_ENCODING,
    SUPPORTED_BACKENDS,
)
from core.errors import StrataConfigError
from transforms.text_codec import resolve_codec


@dataclass(frozen=True)
class StrataConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for the file backend.
        backend: Storage backend name, ``memory`` or ``file``.
        text_encoding: Codec used by encoding layers.
        ciphertext_encoding: Codec used to carry cipher bytes as text.
    """

    data_root: Path
    backend: str
    text_encoding: str
    ciphertext_encoding: str

    @classmethod
    def from_env(cls) -> "StrataConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            StrataConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("STRATA_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        backend = _parse_backend(os.getenv("STRATA_BACKEND", DEFAULT_BACKEND))
        text_encoding = _parse_codec(
            "STRATA_TEXT_ENCODING",
            os.getenv("STRATA_TEXT_ENCODING", DEFAULT_TEXT_ENCODING),
        )
        ciphertext_encoding = _parse_codec(
            "STRATA_CIPHERTEXT_ENCODING",
            os.getenv("STRATA_CIPHERTEXT_ENCODING", DEFAULT_CIPHERTEXT_ENCODING),
        )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            backend=backend,
            text_encoding=text_encoding,
            ciphertext_encoding=ciphertext_encoding,
        )


def _parse_backend(raw_value: str) -> str:
    """Validate the backend environment value."""
    backend = raw_value.strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise StrataConfigError(
            "Invalid STRATA_BACKEND value: "
            f"expected one of {', '.join(SUPPORTED_BACKENDS)}, got '{raw_value}'."
        )
    return backend


def _parse_codec(variable_name: str, raw_value: str) -> str:
    """Validate a codec name environment value.

    Args:
        variable_name: Environment variable the value came from.
        raw_value: Raw string from environment.

    Returns:
        The codec name as given.

    Raises:
        StrataConfigError: If the codec is unknown or not a text encoding.
    """
    try:
        return resolve_codec(raw_value)
    except StrataConfigError as error:
        raise StrataConfigError(f"Invalid {variable_name} value: {error}") from error

"""Text and byte conversion helpers.

This module wraps codec calls so codec failures surface as
Strata encoding errors with actionable messages.
"""

from __future__ import annotations

import codecs

from core.errors import DecodingError, EncodingError, StrataConfigError


def resolve_codec(encoding: str) -> str:
    """Validate a text codec name and return it unchanged.

    Bytes-to-bytes codecs such as hex or base64 are rejected because
    they cannot encode text.

    Raises:
        StrataConfigError: If the codec is unknown or not a text encoding.
    """
    try:
        codec_info = codecs.lookup(encoding)
    except LookupError as error:
        raise StrataConfigError(
            f"Unknown text encoding '{encoding}'. Use a Python codec name such as utf-8."
        ) from error
    if not getattr(codec_info, "_is_text_encoding", True):
        raise StrataConfigError(
            f"Codec '{encoding}' is not a text encoding. Use a codec such as utf-8 or latin-1."
        )
    return encoding


def encode_text(text: str, encoding: str) -> bytes:
    """Encode text strictly with the given codec.

    Raises:
        EncodingError: If the text holds characters the codec cannot represent.
    """
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as error:
        raise EncodingError(
            f"Cannot encode text with {encoding}: {error.reason} "
            f"at position {error.start}."
        ) from error


def decode_bytes(data: bytes, encoding: str) -> str:
    """Decode bytes strictly with the given codec.

    Raises:
        DecodingError: If the bytes are not a valid sequence for the codec.
    """
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as error:
        raise DecodingError(
            f"Cannot decode bytes with {encoding}: {error.reason} "
            f"at position {error.start}. The stored value may be corrupt."
        ) from error

"""Shared JSON serialization for stored values.

Stored values are tagged with their shape so text and bytes
round-trip through JSON without ambiguity.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from core.constants import VALUE_KIND_BYTES, VALUE_KIND_TEXT
from core.errors import StoreError, TypeMismatchError
from core.types import Value, value_kind


def value_to_payload(value: Value) -> dict[str, str]:
    """Serialize a value into a JSON-safe tagged payload.

    Args:
        value: Text or bytes value.

    Returns:
        Dictionary with ``kind`` and ``data`` fields.

    Raises:
        TypeMismatchError: If value is neither text nor bytes.
    """
    if isinstance(value, str):
        return {"kind": VALUE_KIND_TEXT, "data": value}
    if isinstance(value, bytes):
        return {"kind": VALUE_KIND_BYTES, "data": base64.b64encode(value).decode("ascii")}
    raise TypeMismatchError(
        f"Cannot store a {value_kind(value)} value: expected text or bytes."
    )


def value_from_payload(payload: Any) -> Value:
    """Deserialize a tagged payload into a value.

    Args:
        payload: Parsed JSON payload.

    Returns:
        Text or bytes value.

    Raises:
        StoreError: If the payload is malformed.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), str):
        raise StoreError(f"Invalid stored value payload: {payload!r}.")
    kind = payload.get("kind")
    if kind == VALUE_KIND_TEXT:
        return str(payload["data"])
    if kind == VALUE_KIND_BYTES:
        try:
            return base64.b64decode(payload["data"], validate=True)
        except (binascii.Error, ValueError) as error:
            raise StoreError(f"Invalid base64 data in stored value: {error}.") from error
    raise StoreError(f"Unknown stored value kind '{kind}'.")

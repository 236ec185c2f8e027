"""Repeating-key XOR byte transform.

XOR with a repeating keystream is its own inverse, so the same call
obfuscates and restores a payload. It is not a cryptographic cipher.
"""

from __future__ import annotations

from core.constants import PLAINTEXT_ENCODING
from core.errors import InvalidKeyError


class XorCipher:
    """Stateless XOR transform bound to one non-empty key."""

    def __init__(self, key: str | bytes) -> None:
        self._key = _key_bytes(key)

    def apply(self, data: bytes) -> bytes:
        """Return ``data`` XORed with the repeating key."""
        key_length = len(self._key)
        return bytes(byte ^ self._key[index % key_length] for index, byte in enumerate(data))


def xor_transform(data: bytes, key: str | bytes) -> bytes:
    """XOR a byte sequence with a repeating key.

    Args:
        data: Input bytes.
        key: Non-empty key; text keys use their UTF-8 bytes.

    Returns:
        Transformed bytes of the same length as ``data``.

    Raises:
        InvalidKeyError: If the key is empty.
    """
    return XorCipher(key).apply(data)


def _key_bytes(key: str | bytes) -> bytes:
    """Normalize and validate a cipher key."""
    key_bytes = key.encode(PLAINTEXT_ENCODING) if isinstance(key, str) else bytes(key)
    if not key_bytes:
        raise InvalidKeyError(
            "Encryption key must not be empty. Provide at least one character."
        )
    return key_bytes

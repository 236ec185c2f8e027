"""XOR encryption decorator.

Plaintext is XORed as UTF-8 bytes and the cipher bytes are carried to
the inner source as text in ``ciphertext_encoding``. The default
latin-1 maps each byte to one code point, so any cipher output is
representable. Passing ``utf-8`` keeps the stricter behaviour where
cipher bytes must happen to form valid UTF-8.
"""

from __future__ import annotations

from core.constants import DEFAULT_CIPHERTEXT_ENCODING, PLAINTEXT_ENCODING
from core.errors import DecodingError, EncodingError, TypeMismatchError
from core.types import Value, value_kind
from sources.data_source import DataSource
from transforms.text_codec import decode_bytes, encode_text, resolve_codec
from transforms.xor_cipher import XorCipher


class EncryptionDecorator:
    """Data source decorator converting plaintext to ciphertext text."""

    def __init__(
        self,
        inner: DataSource,
        encryption_key: str,
        ciphertext_encoding: str = DEFAULT_CIPHERTEXT_ENCODING,
    ) -> None:
        self._inner = inner
        self._cipher = XorCipher(encryption_key)
        self._ciphertext_encoding = resolve_codec(ciphertext_encoding)

    @property
    def inner(self) -> DataSource:
        return self._inner

    @property
    def ciphertext_encoding(self) -> str:
        return self._ciphertext_encoding

    def write(self, value: Value) -> None:
        """Encrypt plaintext and write the ciphertext to the inner source.

        Raises:
            TypeMismatchError: If value is not text.
            EncodingError: If the cipher bytes are not valid in the ciphertext codec.
        """
        if not isinstance(value, str):
            raise TypeMismatchError(
                f"Encryption layer received a {value_kind(value)} value on write: "
                "expected text."
            )
        cipher_bytes = self._cipher.apply(encode_text(value, PLAINTEXT_ENCODING))
        try:
            ciphertext = decode_bytes(cipher_bytes, self._ciphertext_encoding)
        except DecodingError as error:
            raise EncodingError(
                "Encrypted bytes cannot be carried as "
                f"{self._ciphertext_encoding} text. Use latin-1 ciphertext encoding."
            ) from error
        self._inner.write(ciphertext)

    def read(self) -> Value:
        """Read ciphertext from the inner source and decrypt it.

        Raises:
            TypeMismatchError: If the inner source returns something other than text.
            DecodingError: If the ciphertext does not decrypt to valid UTF-8.
        """
        ciphertext = self._inner.read()
        if not isinstance(ciphertext, str):
            raise TypeMismatchError(
                f"Encryption layer read a {value_kind(ciphertext)} value from its "
                "inner source: expected text."
            )
        try:
            cipher_bytes = encode_text(ciphertext, self._ciphertext_encoding)
        except EncodingError as error:
            raise DecodingError(
                f"Stored ciphertext is not valid {self._ciphertext_encoding} text."
            ) from error
        return decode_bytes(self._cipher.apply(cipher_bytes), PLAINTEXT_ENCODING)

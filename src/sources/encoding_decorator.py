"""Text/bytes encoding decorator.

Writes encode text to bytes before delegating; reads decode the
inner source's bytes back into text.
"""

from __future__ import annotations

from core.constants import DEFAULT_TEXT_ENCODING
from core.errors import TypeMismatchError
from core.types import Value, value_kind
from sources.data_source import DataSource
from transforms.text_codec import decode_bytes, encode_text, resolve_codec


class EncodingDecorator:
    """Data source decorator converting between text and bytes."""

    def __init__(self, inner: DataSource, encoding: str = DEFAULT_TEXT_ENCODING) -> None:
        self._inner = inner
        self._encoding = resolve_codec(encoding)

    @property
    def inner(self) -> DataSource:
        return self._inner

    @property
    def encoding(self) -> str:
        return self._encoding

    def write(self, value: Value) -> None:
        """Encode text and write the bytes to the inner source.

        Raises:
            TypeMismatchError: If value is not text.
            EncodingError: If the text cannot be represented in the codec.
        """
        if not isinstance(value, str):
            raise TypeMismatchError(
                f"Encoding layer ({self._encoding}) received a {value_kind(value)} "
                "value on write: expected text."
            )
        self._inner.write(encode_text(value, self._encoding))

    def read(self) -> Value:
        """Read bytes from the inner source and decode them.

        Raises:
            TypeMismatchError: If the inner source returns something other than bytes.
            DecodingError: If the bytes are invalid for the codec.
        """
        data = self._inner.read()
        if not isinstance(data, bytes):
            raise TypeMismatchError(
                f"Encoding layer ({self._encoding}) read a {value_kind(data)} value "
                "from its inner source: expected bytes."
            )
        return decode_bytes(data, self._encoding)

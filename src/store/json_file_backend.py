"""JSON document storage backend.

This module persists all keys in one JSON document under the data root.
Each set rewrites the document through a temporary file and an atomic
replace, so a failed write leaves the previous document intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from core.constants import STORE_FILE_NAME
from core.errors import StoreError
from core.logging_config import get_logger
from core.types import Value
from store.value_payload import value_from_payload, value_to_payload

_LOGGER = get_logger(__name__)


class JsonFileBackend:
    """Filesystem-backed storage backend."""

    def __init__(self, data_root: Path) -> None:
        self._store_path = data_root / STORE_FILE_NAME

    @property
    def store_path(self) -> Path:
        return self._store_path

    def get(self, key: str) -> Value | None:
        """Return the stored value or None.

        Raises:
            StoreError: If the store document cannot be read.
        """
        payload = self._read_document().get(key)
        if payload is None:
            return None
        return value_from_payload(payload)

    def set(self, key: str, value: Value) -> None:
        """Store value under key and persist the document.

        Raises:
            StoreError: If the store document cannot be written.
        """
        document = self._read_document()
        document[key] = value_to_payload(value)
        self._write_document(document)
        _LOGGER.info(
            "backend_value_written",
            store_path=str(self._store_path),
            key=key,
            value_kind=document[key]["kind"],
        )

    def keys(self) -> tuple[str, ...]:
        """Return stored keys in document order."""
        return tuple(self._read_document())

    def _read_document(self) -> dict[str, Any]:
        if not self._store_path.exists():
            return {}
        try:
            document = json.loads(self._store_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
            raise StoreError(
                f"Failed to read store document at {self._store_path}: {error}. "
                "Repair or delete the file and retry."
            ) from error
        if not isinstance(document, dict):
            raise StoreError(
                f"Invalid store document at {self._store_path}: expected a JSON object."
            )
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        try:
            self._store_path.parent.mkdir(parents=True, exist_ok=True)
            file_descriptor, temp_name = tempfile.mkstemp(
                dir=self._store_path.parent,
                prefix=f".{STORE_FILE_NAME}.",
            )
            try:
                with os.fdopen(file_descriptor, "w", encoding="utf-8") as temp_file:
                    temp_file.write(json.dumps(document, indent=2, sort_keys=True) + "\n")
                os.replace(temp_name, self._store_path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as error:
            raise StoreError(
                f"Failed to write store document at {self._store_path}: {error}."
            ) from error

"""Unit tests for the JSON document storage backend."""

from __future__ import annotations

import json

import pytest

from core.errors import StoreError, TypeMismatchError
from store.json_file_backend import JsonFileBackend


def test_values_persist_across_backend_instances(tmp_path) -> None:
    """Values written by one backend should be readable by a new one."""
    JsonFileBackend(tmp_path).set("greeting", "hello")

    value = JsonFileBackend(tmp_path).get("greeting")

    assert value == "hello"


def test_bytes_values_keep_their_shape(tmp_path) -> None:
    """Bytes should round-trip as bytes, not text."""
    backend = JsonFileBackend(tmp_path)
    backend.set("raw", b"\x00\xffdata")

    assert backend.get("raw") == b"\x00\xffdata"


def test_get_returns_none_without_document(tmp_path) -> None:
    """Missing store file should read as an absent key."""
    assert JsonFileBackend(tmp_path / "empty").get("anything") is None


def test_set_creates_data_root(tmp_path) -> None:
    """First write should create missing parent directories."""
    backend = JsonFileBackend(tmp_path / "nested" / "root")
    backend.set("slot", "value")

    assert backend.store_path.exists()


def test_corrupt_document_raises_store_error(tmp_path) -> None:
    """Unparseable store file should fail with StoreError."""
    backend = JsonFileBackend(tmp_path)
    backend.store_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreError):
        backend.get("slot")


def test_unknown_value_kind_raises_store_error(tmp_path) -> None:
    """Tampered value tags should fail with StoreError."""
    backend = JsonFileBackend(tmp_path)
    document = {"slot": {"kind": "float", "data": "1.0"}}
    backend.store_path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(StoreError):
        backend.get("slot")


def test_set_rejects_unsupported_value(tmp_path) -> None:
    """Non text/bytes values should fail before touching the file."""
    backend = JsonFileBackend(tmp_path)

    with pytest.raises(TypeMismatchError):
        backend.set("slot", 42)  # type: ignore[arg-type]

    assert not backend.store_path.exists()


def test_failed_write_keeps_previous_document(tmp_path) -> None:
    """A rejected write should leave earlier values readable."""
    backend = JsonFileBackend(tmp_path)
    backend.set("slot", "kept")

    with pytest.raises(TypeMismatchError):
        backend.set("other", 3.5)  # type: ignore[arg-type]

    assert JsonFileBackend(tmp_path).get("slot") == "kept"


def test_non_utf8_document_raises_store_error(tmp_path) -> None:
    """Store file bytes that are not UTF-8 should fail with StoreError."""
    backend = JsonFileBackend(tmp_path)
    backend.store_path.write_bytes(b"\xff\xfe{}")

    with pytest.raises(StoreError):
        backend.get("slot")


def test_non_ascii_base64_data_raises_store_error(tmp_path) -> None:
    """Tampered bytes payloads with non-ASCII data should fail with StoreError."""
    backend = JsonFileBackend(tmp_path)
    document = {"slot": {"kind": "bytes", "data": "é"}}
    backend.store_path.write_text(json.dumps(document), encoding="utf-8")

    with pytest.raises(StoreError):
        backend.get("slot")


def test_keys_lists_stored_slots(tmp_path) -> None:
    """Keys should reflect every slot written to the document."""
    backend = JsonFileBackend(tmp_path)
    backend.set("b", "beta")
    backend.set("a", b"alpha")

    assert sorted(JsonFileBackend(tmp_path).keys()) == ["a", "b"]

"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import StrataConfig
from core.errors import StrataConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root from environment."""
    monkeypatch.setenv("STRATA_DATA_ROOT", "./.tmp-strata")

    config = StrataConfig.from_env()

    assert config.data_root.name == ".tmp-strata"


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to defaults."""
    for name in ("STRATA_BACKEND", "STRATA_TEXT_ENCODING", "STRATA_CIPHERTEXT_ENCODING"):
        monkeypatch.delenv(name, raising=False)

    config = StrataConfig.from_env()

    assert (config.backend, config.text_encoding, config.ciphertext_encoding) == (
        "file",
        "utf-8",
        "latin-1",
    )


def test_from_env_raises_for_unknown_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported backends."""
    monkeypatch.setenv("STRATA_BACKEND", "redis")

    with pytest.raises(StrataConfigError):
        StrataConfig.from_env()


def test_from_env_raises_for_unknown_codec(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for codecs Python does not know."""
    monkeypatch.setenv("STRATA_CIPHERTEXT_ENCODING", "not-a-codec")

    with pytest.raises(StrataConfigError):
        StrataConfig.from_env()


def test_from_env_raises_for_non_text_codec(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for codecs that do not encode text."""
    monkeypatch.setenv("STRATA_TEXT_ENCODING", "hex")

    with pytest.raises(StrataConfigError):
        StrataConfig.from_env()

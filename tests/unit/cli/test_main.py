"""Unit tests for CLI command handling."""

from __future__ import annotations

from cli.main import main


def _base_args(tmp_path) -> list[str]:
    return ["--data-root", str(tmp_path), "--backend", "file"]


def test_cli_write_then_read_round_trips(tmp_path, capsys) -> None:
    """CLI read should print the value an earlier write stored."""
    write_code = main([*_base_args(tmp_path), "write", "note", "hello", "--encryption-key", "k"])
    capsys.readouterr()

    read_code = main([*_base_args(tmp_path), "read", "note", "--encryption-key", "k"])
    output = capsys.readouterr().out.strip()

    assert (write_code, read_code, output) == (0, 0, "hello")


def test_cli_read_missing_key_reports_error(tmp_path, capsys) -> None:
    """Missing keys should print an error line and exit non-zero."""
    exit_code = main([*_base_args(tmp_path), "read", "missing"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")


def test_cli_empty_encryption_key_reports_error(tmp_path, capsys) -> None:
    """Empty encryption keys should be rejected with exit code 1."""
    exit_code = main([*_base_args(tmp_path), "write", "note", "hello", "--encryption-key", ""])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and "empty" in output


def test_cli_describe_prints_layers(tmp_path, capsys) -> None:
    """Describe should list layers from outermost to the base store."""
    exit_code = main([*_base_args(tmp_path), "describe", "note", "--encryption-key", "k"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert lines == ["encryption:latin-1", "encoding:utf-8", "base_store:note"]


def test_cli_demo_prints_sample_text(capsys) -> None:
    """Demo should round-trip the sample text through an encrypted pipeline."""
    exit_code = main(["demo"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == "Design Patterns"


def test_cli_list_prints_stored_keys(tmp_path, capsys) -> None:
    """List should print each key that holds a value."""
    main([*_base_args(tmp_path), "write", "note", "hello"])
    capsys.readouterr()

    exit_code = main([*_base_args(tmp_path), "list"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and lines == ["note"]


def test_cli_non_text_codec_reports_error(tmp_path, capsys, monkeypatch) -> None:
    """A non-text codec in the environment should print an error line."""
    monkeypatch.setenv("STRATA_TEXT_ENCODING", "hex")

    exit_code = main([*_base_args(tmp_path), "write", "note", "hello"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")

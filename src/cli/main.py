"""Strata CLI entry points.

This module exposes commands for writing and reading keyed values.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import StrataConfig
from core.constants import (
    DEMO_ENCRYPTION_KEY,
    DEMO_PLAINTEXT,
    DEMO_STORAGE_KEY,
    SUPPORTED_BACKENDS,
)
from core.errors import StrataError
from core.logging_config import get_logger
from sources.client import StrataClient
from sources.pipeline import build_default_pipeline, describe_pipeline

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="strata", description="Strata layered value store")
    parser.add_argument("--data-root", help="Override STRATA_DATA_ROOT for this command")
    parser.add_argument(
        "--backend",
        choices=SUPPORTED_BACKENDS,
        help="Override STRATA_BACKEND for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_write_command(subparsers)
    _add_read_command(subparsers)
    _add_describe_command(subparsers)
    subparsers.add_parser("list", help="List keys that hold a value")
    subparsers.add_parser("demo", help="Round-trip a sample value through an encrypted pipeline")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Strata CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "demo":
            return _run_demo_command()
        client = _build_client(args.data_root, args.backend)
        if args.command == "write":
            return _run_write_command(client, args)
        if args.command == "read":
            return _run_read_command(client, args)
        if args.command == "describe":
            return _run_describe_command(client, args)
        if args.command == "list":
            return _run_list_command(client)
    except StrataError as error:
        _LOGGER.error("command_failed", command=args.command, error_type=type(error).__name__)
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_root: str | None, backend: str | None) -> StrataClient:
    """Build SDK client with optional overrides.

    Args:
        data_root: Optional override path.
        backend: Optional override backend name.

    Returns:
        Configured SDK client.
    """
    config = StrataConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    if backend:
        config = replace(config, backend=backend)
    return StrataClient(config)


def _run_write_command(client: StrataClient, args: argparse.Namespace) -> int:
    """Handle write command."""
    client.write(args.key, args.value, encryption_key=args.encryption_key)
    print(f"written={args.key}")
    return 0


def _run_read_command(client: StrataClient, args: argparse.Namespace) -> int:
    """Handle read command."""
    print(client.read(args.key, encryption_key=args.encryption_key))
    return 0


def _run_describe_command(client: StrataClient, args: argparse.Namespace) -> int:
    """Handle describe command."""
    pipeline = client.pipeline(args.key, encryption_key=args.encryption_key)
    for layer_name in describe_pipeline(pipeline):
        print(layer_name)
    return 0


def _run_list_command(client: StrataClient) -> int:
    """Handle list command."""
    for key in client.keys():
        print(key)
    return 0


def _run_demo_command() -> int:
    """Write and read the sample value through an in-memory encrypted pipeline."""
    pipeline = build_default_pipeline(DEMO_STORAGE_KEY, DEMO_ENCRYPTION_KEY)
    pipeline.write(DEMO_PLAINTEXT)
    print(pipeline.read())
    return 0


def _add_write_command(subparsers: Any) -> None:
    """Register write subcommand."""
    parser = subparsers.add_parser("write", help="Write a text value under a key")
    parser.add_argument("key", help="Storage key")
    parser.add_argument("value", help="Text value to store")
    parser.add_argument("--encryption-key", help="Optional XOR encryption key")


def _add_read_command(subparsers: Any) -> None:
    """Register read subcommand."""
    parser = subparsers.add_parser("read", help="Read the text value stored under a key")
    parser.add_argument("key", help="Storage key")
    parser.add_argument("--encryption-key", help="XOR key the value was written with")


def _add_describe_command(subparsers: Any) -> None:
    """Register describe subcommand."""
    parser = subparsers.add_parser("describe", help="Print pipeline layers, outermost first")
    parser.add_argument("key", help="Storage key")
    parser.add_argument("--encryption-key", help="Optional XOR encryption key")

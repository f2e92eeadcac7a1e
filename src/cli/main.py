"""Player data CLI entry points.

This module exposes storage inspection and maintenance commands.
It maps argparse commands onto DocumentStore calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.document_commands import add_document_commands, run_document_command
from core.config import StoreConfig
from core.errors import PlayerDataError
from core.logging_config import enable_console_logging
from core.store_profile import load_store_profile
from core.types import SUPPORTED_PLATFORMS, SUPPORTED_VARIANTS
from store.document_store import DocumentStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="playerdata", description="Player data storage CLI")
    parser.add_argument("--app-id", help="Override PLAYERDATA_APP_ID for this command")
    parser.add_argument(
        "--platform",
        choices=SUPPORTED_PLATFORMS,
        help="Override detected platform family",
    )
    parser.add_argument(
        "--variant",
        choices=SUPPORTED_VARIANTS,
        help="Storage variant: per-application desktop root or sandboxed local root",
    )
    parser.add_argument("--profile", help="YAML store profile applied before CLI overrides")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit structured log events to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_document_commands(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the player data CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        enable_console_logging()
    try:
        store = DocumentStore.from_config(_build_config(args))
        return run_document_command(store, args)
    except PlayerDataError as error:
        print(f"error={error}")
        return 1


def _build_config(args: argparse.Namespace) -> StoreConfig:
    """Build config from env, then profile, then CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Effective store configuration.
    """
    config = StoreConfig.from_env()
    if args.profile:
        config = load_store_profile(args.profile).apply(config)
    if args.app_id:
        config = replace(config, app_id=args.app_id)
    if args.platform:
        config = replace(config, platform=args.platform)
    if args.variant:
        config = replace(config, variant=args.variant)
    return config

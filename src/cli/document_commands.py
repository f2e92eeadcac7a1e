"""Document command wiring for the player data CLI."""

from __future__ import annotations

import argparse
from typing import Any

from store.document_store import DocumentStore


def add_document_commands(subparsers: Any) -> None:
    """Register storage subcommands."""
    subparsers.add_parser("root", help="Print the resolved storage root")
    read_parser = subparsers.add_parser("read", help="Print a stored document")
    read_parser.add_argument("path", nargs="+", help="Path segments under the storage root")
    write_parser = subparsers.add_parser("write", help="Replace a stored document with text")
    write_parser.add_argument("path", nargs="+", help="Path segments under the storage root")
    write_parser.add_argument("--text", required=True, help="Document contents")
    delete_parser = subparsers.add_parser("delete", help="Delete a file or directory")
    delete_parser.add_argument("path", nargs="+", help="Path segments under the storage root")
    exists_parser = subparsers.add_parser(
        "exists", help="Report whether a path is a file or directory"
    )
    exists_parser.add_argument("path", nargs="+", help="Path segments under the storage root")
    mkdir_parser = subparsers.add_parser("mkdir", help="Create a directory under the storage root")
    mkdir_parser.add_argument("path", nargs="+", help="Path segments under the storage root")
    wipe_parser = subparsers.add_parser("wipe", help="Delete all stored documents")
    wipe_parser.add_argument(
        "--yes",
        action="store_true",
        help="Confirm deleting everything under the storage root",
    )


def run_document_command(store: DocumentStore, args: argparse.Namespace) -> int:
    """Dispatch a parsed storage command.

    Args:
        store: Store built from effective configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.command == "root":
        print(store.root)
        return 0
    if args.command == "read":
        print(store.read_string(*args.path), end="")
        return 0
    if args.command == "write":
        store.write_string(args.text, *args.path)
        print(f"written={store.resolve(*args.path)}")
        return 0
    if args.command == "delete":
        deleted = store.delete(*args.path)
        print(f"deleted={str(deleted).lower()}")
        return 0 if deleted else 1
    if args.command == "exists":
        print(_describe_path(store, args.path))
        return 0
    if args.command == "mkdir":
        store.create_directory(*args.path)
        print(f"directory={store.resolve(*args.path)}")
        return 0
    if args.command == "wipe":
        if not args.yes:
            print(f"error=Refusing to wipe {store.root} without --yes.")
            return 1
        store.wipe()
        print(f"wiped={store.root}")
        return 0
    raise ValueError(f"Unsupported command: {args.command}")


def _describe_path(store: DocumentStore, path: list[str]) -> str:
    if store.has_file(*path):
        return "file"
    if store.has_directory(*path):
        return "directory"
    return "missing"

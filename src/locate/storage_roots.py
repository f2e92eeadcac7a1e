"""Host root directory providers."""

from __future__ import annotations

from pathlib import Path

from core.types import StorageRoots


def default_external_storage_path() -> Path:
    """Return the per-user external storage directory."""
    return Path.home().absolute()


def default_local_storage_path() -> Path:
    """Return the process-local storage directory."""
    return Path.cwd().absolute()


def default_storage_roots() -> StorageRoots:
    """Return host storage roots for the running process."""
    return StorageRoots(
        external_root=default_external_storage_path(),
        local_root=default_local_storage_path(),
    )

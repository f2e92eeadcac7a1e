"""Shared typed models.

This module defines the platform and variant vocabulary and the
immutable root-path model shared by resolution, config, and store layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

PlatformName = Literal["windows", "mac", "unix", "other"]
SUPPORTED_PLATFORMS: tuple[PlatformName, ...] = ("windows", "mac", "unix", "other")

StorageVariant = Literal["desktop", "sandboxed"]
SUPPORTED_VARIANTS: tuple[StorageVariant, ...] = ("desktop", "sandboxed")


@dataclass(frozen=True)
class StorageRoots:
    """Host-provided base directories used to derive a storage root.

    Attributes:
        external_root: Per-user storage directory, usually the home directory.
        local_root: Process-local or sandbox directory.
    """

    external_root: Path
    local_root: Path

"""Host platform classification for storage root selection.

This module maps operating system names onto the four platform families
that drive root directory layout.
"""

from __future__ import annotations

import platform
from typing import cast

from core.errors import PlayerDataConfigError
from core.types import (
    SUPPORTED_PLATFORMS,
    SUPPORTED_VARIANTS,
    PlatformName,
    StorageVariant,
)

_WINDOWS_MARKERS = ("win",)
_MAC_MARKERS = ("mac", "darwin")
_UNIX_MARKERS = ("nix", "nux", "aix", "bsd", "sunos")


def detect_platform(system_name: str | None = None) -> PlatformName:
    """Classify an operating system name into a platform family.

    Args:
        system_name: OS name to classify. Defaults to ``platform.system()``.

    Returns:
        One of ``windows``, ``mac``, ``unix`` or ``other``.
    """
    name = (system_name if system_name is not None else platform.system()).lower()
    if any(marker in name for marker in _MAC_MARKERS):
        return "mac"
    if any(marker in name for marker in _WINDOWS_MARKERS):
        return "windows"
    if any(marker in name for marker in _UNIX_MARKERS):
        return "unix"
    return "other"


def parse_platform_name(raw_value: str) -> PlatformName:
    """Validate an explicit platform override.

    Raises:
        PlayerDataConfigError: If the value is not a supported platform.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_PLATFORMS:
        raise PlayerDataConfigError(
            f"Unsupported platform '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_PLATFORMS)}."
        )
    return cast(PlatformName, normalized)


def parse_variant_name(raw_value: str) -> StorageVariant:
    """Validate a storage variant name.

    Raises:
        PlayerDataConfigError: If the value is not a supported variant.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_VARIANTS:
        raise PlayerDataConfigError(
            f"Unsupported storage variant '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_VARIANTS)}."
        )
    return cast(StorageVariant, normalized)

"""Per-application storage root and path resolution.

This module derives the storage root for an application identifier on a
given platform and joins path segments beneath it. Resolution is pure:
it never touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Sequence

from core.constants import (
    APP_ID_DOMAIN_SEPARATOR,
    MAC_APP_SUPPORT_DIR_NAME,
    MAC_LIBRARY_DIR_NAME,
    NO_FILE_PATH_MESSAGE,
    UNIX_HIDDEN_DIR_PREFIX,
    WINDOWS_APPDATA_DIR_NAME,
    WINDOWS_ROAMING_DIR_NAME,
)
from core.errors import InvalidPathError, PlayerDataConfigError
from core.types import PlatformName, StorageRoots


def resolve_root(app_id: str, platform: PlatformName, roots: StorageRoots) -> Path:
    """Resolve the storage root for an application.

    Args:
        app_id: Application identifier, e.g. ``com.example.Game``.
        platform: Platform family driving the directory layout.
        roots: Host-provided external and local base directories.

    Returns:
        Absolute storage root path.

    Raises:
        PlayerDataConfigError: If a per-application layout is requested
            with an empty identifier.
    """
    if platform == "other":
        return roots.local_root.absolute()
    if not app_id.strip():
        raise PlayerDataConfigError(
            "Application identifier must not be empty. "
            "Pass the game identifier used to name its save directory."
        )
    if platform == "windows":
        root = roots.external_root / WINDOWS_APPDATA_DIR_NAME / WINDOWS_ROAMING_DIR_NAME / app_id
    elif platform == "mac":
        root = roots.external_root / MAC_LIBRARY_DIR_NAME / MAC_APP_SUPPORT_DIR_NAME / app_id
    else:
        root = roots.external_root / f"{UNIX_HIDDEN_DIR_PREFIX}{strip_domain_prefix(app_id)}"
    return root.absolute()


def strip_domain_prefix(app_id: str) -> str:
    """Drop a reverse-domain prefix, keeping the final identifier segment.

    ``com.example.Game`` becomes ``Game``; identifiers without dots are
    returned unchanged.
    """
    if APP_ID_DOMAIN_SEPARATOR not in app_id:
        return app_id
    return app_id.rsplit(APP_ID_DOMAIN_SEPARATOR, 1)[1]


def require_segments(
    segments: Sequence[str],
    message: str = NO_FILE_PATH_MESSAGE,
) -> tuple[str, ...]:
    """Validate a path-segment sequence.

    Args:
        segments: Ordered path segments.
        message: Error message used when no segments are given.

    Returns:
        Segments as a tuple.

    Raises:
        InvalidPathError: If the sequence is empty, is a bare string, or a
            segment would leave the storage root.
    """
    if isinstance(segments, (str, bytes)):
        raise InvalidPathError(
            f"Expected a sequence of path segments, got a single string '{segments!s}'. "
            "Wrap the path in a list or pass segments separately."
        )
    normalized = tuple(segments)
    if not normalized:
        raise InvalidPathError(message)
    for segment in normalized:
        _require_relative_segment(segment)
    return normalized


def join_path(root: Path, segments: Sequence[str]) -> Path:
    """Join path segments beneath a storage root.

    Raises:
        InvalidPathError: If ``segments`` is empty.
    """
    return root.joinpath(*require_segments(segments))


def _require_relative_segment(segment: str) -> None:
    """Reject segments that are anchored or climb above the storage root."""
    segment_path = PurePath(segment)
    if segment_path.anchor:
        raise InvalidPathError(
            f"Path segment '{segment}' is absolute. "
            "Pass paths relative to the storage root."
        )
    if ".." in segment_path.parts:
        raise InvalidPathError(
            f"Path segment '{segment}' refers to a parent directory. "
            "Pass paths that stay beneath the storage root."
        )

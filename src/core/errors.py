"""Player data exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Every store operation surfaces one of these types with the cause chained.
"""

from __future__ import annotations


class PlayerDataError(Exception):
    """Base exception for all player data failures."""


class PlayerDataConfigError(PlayerDataError):
    """Raised for invalid runtime configuration or store profiles."""


class InvalidPathError(PlayerDataError):
    """Raised when an operation receives an empty path-segment sequence."""


class PlayerDataSerializationError(PlayerDataError):
    """Raised when an XML or JSON document cannot be encoded or decoded."""


class PlayerDataStorageError(PlayerDataError):
    """Raised for filesystem failures such as missing files or denied access."""


SerializationError = PlayerDataSerializationError
StorageError = PlayerDataStorageError

"""Public SDK surface for player data storage.

This module provides a stable import path for library users.
It re-exports the store, resolver helpers, config, and error types.
"""

from __future__ import annotations

from core.config import StoreConfig
from core.errors import (
    InvalidPathError,
    PlayerDataConfigError,
    PlayerDataError,
    PlayerDataSerializationError,
    PlayerDataStorageError,
    SerializationError,
    StorageError,
)
from core.store_profile import StoreProfile, load_store_profile
from core.types import PlatformName, StorageRoots, StorageVariant
from locate.path_resolver import join_path, resolve_root
from locate.platform_detection import detect_platform
from locate.storage_roots import default_storage_roots
from store.codecs import DocumentCodec
from store.document_store import DocumentStore
from store.json_codec import JsonCodec
from store.xml_codec import XmlCodec

__all__ = [
    "DocumentCodec",
    "DocumentStore",
    "InvalidPathError",
    "JsonCodec",
    "PlatformName",
    "PlayerDataConfigError",
    "PlayerDataError",
    "PlayerDataSerializationError",
    "PlayerDataStorageError",
    "SerializationError",
    "StorageError",
    "StorageRoots",
    "StorageVariant",
    "StoreConfig",
    "StoreProfile",
    "XmlCodec",
    "default_storage_roots",
    "detect_platform",
    "join_path",
    "load_store_profile",
    "resolve_root",
]

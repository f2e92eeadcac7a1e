"""Core constants used across player data modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in resolution and IO code.
"""

from __future__ import annotations

DEFAULT_APP_ID = "playerdata"
DEFAULT_VARIANT = "desktop"
DEFAULT_ENCODING = "utf-8"
DEFAULT_JSON_INDENT = 2
STORE_PROFILE_VERSION = 1

WINDOWS_APPDATA_DIR_NAME = "AppData"
WINDOWS_ROAMING_DIR_NAME = "Roaming"
MAC_LIBRARY_DIR_NAME = "Library"
MAC_APP_SUPPORT_DIR_NAME = "Application Support"
UNIX_HIDDEN_DIR_PREFIX = "."
APP_ID_DOMAIN_SEPARATOR = "."

XML_DEFAULT_ROOT_TAG = "document"
XML_ITEM_TAG = "item"
XML_ENTRY_TAG = "entry"
XML_KEY_ATTRIBUTE = "key"
XML_NULL_ATTRIBUTE = "null"

ENV_APP_ID = "PLAYERDATA_APP_ID"
ENV_PLATFORM = "PLAYERDATA_PLATFORM"
ENV_VARIANT = "PLAYERDATA_VARIANT"
ENV_EXTERNAL_ROOT = "PLAYERDATA_EXTERNAL_ROOT"
ENV_LOCAL_ROOT = "PLAYERDATA_LOCAL_ROOT"

NO_FILE_PATH_MESSAGE = "No file path specified"
NO_PATH_MESSAGE = "No path specified"

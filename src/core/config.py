"""Runtime configuration model for player data stores.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_APP_ID,
    DEFAULT_VARIANT,
    ENV_APP_ID,
    ENV_EXTERNAL_ROOT,
    ENV_LOCAL_ROOT,
    ENV_PLATFORM,
    ENV_VARIANT,
)
from core.types import PlatformName, StorageRoots, StorageVariant
from locate.path_resolver import resolve_root
from locate.platform_detection import detect_platform, parse_platform_name, parse_variant_name
from locate.storage_roots import default_external_storage_path, default_local_storage_path


@dataclass(frozen=True)
class StoreConfig:
    """Validated runtime configuration.

    Attributes:
        app_id: Application identifier naming the save directory.
        platform: Platform family, detected from the host when not overridden.
        variant: Storage variant controlling root selection and wipe behavior.
        roots: External and local base directories.
    """

    app_id: str
    platform: PlatformName
    variant: StorageVariant
    roots: StorageRoots

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PlayerDataConfigError: If environment values are invalid.
        """
        app_id = os.getenv(ENV_APP_ID, DEFAULT_APP_ID)
        platform_value = os.getenv(ENV_PLATFORM)
        platform = parse_platform_name(platform_value) if platform_value else detect_platform()
        variant = parse_variant_name(os.getenv(ENV_VARIANT, DEFAULT_VARIANT))
        roots = StorageRoots(
            external_root=_path_from_env(ENV_EXTERNAL_ROOT) or default_external_storage_path(),
            local_root=_path_from_env(ENV_LOCAL_ROOT) or default_local_storage_path(),
        )
        return cls(app_id=app_id, platform=platform, variant=variant, roots=roots)

    def resolve_root(self) -> Path:
        """Return the storage root for the configured variant.

        Sandboxed stores always live in the local root; desktop stores
        follow the per-platform layout.
        """
        if self.variant == "sandboxed":
            return self.roots.local_root.absolute()
        return resolve_root(self.app_id, self.platform, self.roots)


def _path_from_env(name: str) -> Path | None:
    raw_value = os.getenv(name)
    if not raw_value:
        return None
    return Path(raw_value).expanduser().resolve()

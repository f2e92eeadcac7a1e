"""Typed YAML store profiles.

This module loads and validates YAML profile files that pin an
application identifier, platform, variant, and root overrides so CLI
and SDK callers can share one store description.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.config import StoreConfig
from core.constants import STORE_PROFILE_VERSION
from core.errors import PlayerDataConfigError
from core.types import PlatformName, StorageVariant
from locate.platform_detection import parse_platform_name, parse_variant_name

_ALLOWED_KEYS = frozenset(
    {"version", "app_id", "platform", "variant", "external_root", "local_root"}
)


@dataclass(frozen=True)
class StoreProfile:
    """Validated store profile.

    Fields left as ``None`` keep the value from the base configuration.
    """

    app_id: str
    platform: PlatformName | None = None
    variant: StorageVariant | None = None
    external_root: Path | None = None
    local_root: Path | None = None

    def apply(self, config: StoreConfig) -> StoreConfig:
        """Overlay this profile on a base configuration."""
        roots = replace(
            config.roots,
            external_root=self.external_root or config.roots.external_root,
            local_root=self.local_root or config.roots.local_root,
        )
        return replace(
            config,
            app_id=self.app_id,
            platform=self.platform or config.platform,
            variant=self.variant or config.variant,
            roots=roots,
        )


def load_store_profile(profile_path: str) -> StoreProfile:
    """Load and validate a YAML store profile from disk.

    Args:
        profile_path: File path to YAML profile.

    Returns:
        Fully validated store profile.

    Raises:
        PlayerDataConfigError: If the file is missing, unreadable, or invalid.
    """
    payload = _load_yaml_payload(profile_path)
    mapping = _expect_mapping(payload)
    unknown_keys = sorted(set(mapping) - _ALLOWED_KEYS)
    if unknown_keys:
        raise PlayerDataConfigError(
            f"Unknown store profile keys: {', '.join(unknown_keys)}. "
            f"Allowed keys: {', '.join(sorted(_ALLOWED_KEYS))}."
        )
    version = mapping.get("version")
    if version != STORE_PROFILE_VERSION:
        raise PlayerDataConfigError(
            f"Unsupported store profile version {version!r}. "
            f"Set 'version: {STORE_PROFILE_VERSION}'."
        )
    app_id = _optional_string(mapping, "app_id")
    if not app_id:
        raise PlayerDataConfigError("Store profile must define a non-empty 'app_id'.")
    platform_value = _optional_string(mapping, "platform")
    variant_value = _optional_string(mapping, "variant")
    return StoreProfile(
        app_id=app_id,
        platform=parse_platform_name(platform_value) if platform_value else None,
        variant=parse_variant_name(variant_value) if variant_value else None,
        external_root=_optional_path(mapping, "external_root"),
        local_root=_optional_path(mapping, "local_root"),
    )


def _load_yaml_payload(profile_path: str) -> object:
    profile_file = Path(profile_path).expanduser().resolve()
    if not profile_file.exists():
        raise PlayerDataConfigError(
            f"Store profile does not exist at {profile_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(profile_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise PlayerDataConfigError(
            f"Failed to read store profile at {profile_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise PlayerDataConfigError(
            f"Failed to parse YAML store profile at {profile_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise PlayerDataConfigError(
            f"Store profile at {profile_file} is empty. Define 'version' and 'app_id'."
        )
    return payload


def _expect_mapping(value: object) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise PlayerDataConfigError(
            f"Invalid store profile: expected mapping at top level, got {type(value).__name__}."
        )
    for key in value:
        if not isinstance(key, str):
            raise PlayerDataConfigError(
                f"Invalid store profile: expected string keys, got {type(key).__name__}."
            )
    return cast(Mapping[str, object], value)


def _optional_string(mapping: Mapping[str, object], key: str) -> str | None:
    value = mapping.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise PlayerDataConfigError(
            f"Invalid store profile field '{key}': expected string, got {type(value).__name__}."
        )
    return value


def _optional_path(mapping: Mapping[str, object], key: str) -> Path | None:
    value = _optional_string(mapping, key)
    if not value:
        return None
    return Path(value).expanduser().resolve()

"""Unit tests for YAML store profile parsing."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from core.config import StoreConfig
from core.errors import PlayerDataConfigError
from core.store_profile import load_store_profile
from tests.fixture_paths import fixture_path


def test_load_store_profile_valid_profile_parses_fields() -> None:
    """Valid profile should parse identifier, platform, and variant."""
    profile = load_store_profile(str(fixture_path("store_profile/valid.yaml")))

    assert (
        profile.app_id == "com.example.Game"
        and profile.platform == "unix"
        and profile.variant == "desktop"
    )


def test_apply_overlays_profile_on_config(storage_roots) -> None:
    """Profile values should replace config values they define."""
    base = replace(StoreConfig.from_env(), platform="windows", roots=storage_roots)
    profile = load_store_profile(str(fixture_path("store_profile/sandboxed.yaml")))

    config = profile.apply(base)

    assert (
        config.app_id == "com.example.Game"
        and config.platform == "windows"
        and config.variant == "sandboxed"
        and config.roots == storage_roots
    )


def test_load_store_profile_resolves_root_paths(tmp_path: Path) -> None:
    """Root overrides in a profile should become absolute paths."""
    profile_path = tmp_path / "profile.yaml"
    profile_path.write_text(
        f"version: 1\napp_id: game\nexternal_root: {tmp_path / 'home'}\n",
        encoding="utf-8",
    )

    profile = load_store_profile(str(profile_path))

    assert profile.external_root == (tmp_path / "home").resolve() and profile.local_root is None


@pytest.mark.parametrize(
    "fixture_name",
    [
        "unknown_key.yaml",
        "bad_version.yaml",
        "bad_platform.yaml",
        "malformed.yaml",
    ],
)
def test_load_store_profile_invalid_profiles_raise_error(fixture_name: str) -> None:
    """Invalid profiles should be rejected with a config error."""
    with pytest.raises(PlayerDataConfigError):
        load_store_profile(str(fixture_path(f"store_profile/{fixture_name}")))


def test_load_store_profile_missing_file_raises_error(tmp_path: Path) -> None:
    """Missing profile files should raise a config error."""
    with pytest.raises(PlayerDataConfigError):
        load_store_profile(str(tmp_path / "absent.yaml"))


def test_load_store_profile_empty_file_raises_error(tmp_path: Path) -> None:
    """Empty profile files should raise a config error."""
    profile_path = tmp_path / "empty.yaml"
    profile_path.write_text("", encoding="utf-8")

    with pytest.raises(PlayerDataConfigError):
        load_store_profile(str(profile_path))

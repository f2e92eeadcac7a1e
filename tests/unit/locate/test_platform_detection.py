"""Unit tests for host platform classification."""

from __future__ import annotations

import pytest

from core.errors import PlayerDataConfigError
from locate.platform_detection import detect_platform, parse_platform_name, parse_variant_name


@pytest.mark.parametrize(
    ("system_name", "expected"),
    [
        ("Windows", "windows"),
        ("Darwin", "mac"),
        ("Mac OS X", "mac"),
        ("Linux", "unix"),
        ("FreeBSD", "unix"),
        ("AIX", "unix"),
        ("Java", "other"),
    ],
)
def test_detect_platform_classifies_system_names(system_name: str, expected: str) -> None:
    """Known OS names should map onto their platform family."""
    assert detect_platform(system_name) == expected


def test_detect_platform_defaults_to_host(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit name the host OS should be queried."""
    monkeypatch.setattr("locate.platform_detection.platform.system", lambda: "Linux")

    assert detect_platform() == "unix"


def test_parse_platform_name_normalizes_case() -> None:
    """Overrides should be case-insensitive."""
    assert parse_platform_name(" MAC ") == "mac"


def test_parse_platform_name_rejects_unknown() -> None:
    """Unsupported platform names should fail with a config error."""
    with pytest.raises(PlayerDataConfigError):
        parse_platform_name("amiga")


def test_parse_variant_name_rejects_unknown() -> None:
    """Unsupported variants should fail with a config error."""
    with pytest.raises(PlayerDataConfigError):
        parse_variant_name("cloud")

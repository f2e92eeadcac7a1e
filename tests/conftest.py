"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def storage_roots(tmp_path: Path):
    """Isolated external and local roots under the test temp directory."""
    from core.types import StorageRoots

    external_root = tmp_path / "home"
    local_root = tmp_path / "local"
    external_root.mkdir()
    local_root.mkdir()
    return StorageRoots(external_root=external_root, local_root=local_root)


@pytest.fixture(autouse=True)
def _clear_store_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host PLAYERDATA_* variables out of config-driven tests."""
    for name in (
        "PLAYERDATA_APP_ID",
        "PLAYERDATA_PLATFORM",
        "PLAYERDATA_VARIANT",
        "PLAYERDATA_EXTERNAL_ROOT",
        "PLAYERDATA_LOCAL_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)

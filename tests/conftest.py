"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_TALLY_ENV_NAMES = (
    "FILE_KEY",
    "BUCKET_NAME",
    "TALLY_S3_REGION",
    "TALLY_S3_PROFILE",
    "TALLY_GROUP_COLUMN",
    "TALLY_CACHE_DIR",
    "TALLY_CHUNK_SIZE",
    "TALLY_CONNECT_TIMEOUT",
    "TALLY_READ_TIMEOUT",
    "TALLY_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear Tally variables so host settings never leak into tests."""
    for name in _TALLY_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)

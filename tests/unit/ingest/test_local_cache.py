"""Unit tests for local cache path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from ingest.local_cache import is_cached, local_cache_path


@pytest.mark.parametrize(
    ("object_key", "expected_name"),
    [
        ("exports/2024/companies.csv", "companies.csv"),
        ("companies.csv", "companies.csv"),
        ("exports/", "exports"),
        ("", "temp.csv"),
        ("exports/..", "temp.csv"),
    ],
)
def test_local_cache_path_uses_final_key_segment(
    tmp_path: Path,
    object_key: str,
    expected_name: str,
) -> None:
    """Cache file name should be the last key segment or the default."""
    assert local_cache_path(tmp_path, object_key) == tmp_path / expected_name


def test_is_cached_reflects_file_presence_only(tmp_path: Path) -> None:
    """An existing file counts as cached even when it is empty."""
    path = tmp_path / "companies.csv"
    assert is_cached(path) is False

    path.write_bytes(b"")

    assert is_cached(path) is True

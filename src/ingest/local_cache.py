"""Local cache file resolution.

The cache policy is filename existence only: a present file is reused
as-is, without checking its content or age.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from core.constants import DEFAULT_CACHE_FILE_NAME


def local_cache_path(cache_dir: Path, object_key: str) -> Path:
    """Derive the local cache file path for an object key.

    Args:
        cache_dir: Directory holding cache files.
        object_key: S3 object key, ``/``-separated.

    Returns:
        ``cache_dir`` joined with the key's final segment, or with the
        default cache file name when the key has no final segment.
    """
    file_name = PurePosixPath(object_key).name
    if file_name in ("", ".."):
        file_name = DEFAULT_CACHE_FILE_NAME
    return cache_dir / file_name


def is_cached(path: Path) -> bool:
    """Return whether a cache file already exists at ``path``."""
    return path.exists()

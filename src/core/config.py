"""Runtime configuration model for Tally.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    BUCKET_NAME_ENV,
    DEFAULT_CACHE_DIR,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_GROUP_COLUMN,
    DEFAULT_LOG_LEVEL,
    DEFAULT_READ_TIMEOUT_SECONDS,
    DEFAULT_S3_REGION,
    FILE_KEY_ENV,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import TallyConfigError


@dataclass(frozen=True)
class TallyConfig:
    """Validated runtime configuration.

    Attributes:
        bucket: Source bucket name.
        object_key: Object key of the CSV within the bucket.
        s3_region: AWS region for the S3 client.
        s3_profile: Optional AWS profile for boto3 session initialization.
        group_column: CSV column used for grouping.
        cache_dir: Directory holding the local cache file.
        chunk_size: Maximum bytes read per streamed chunk.
        connect_timeout: Connection timeout in seconds.
        read_timeout: Socket read timeout in seconds.
        log_level: Minimum structlog level name.
        refresh: Re-download even when the cache file exists.
    """

    bucket: str
    object_key: str
    s3_region: str = DEFAULT_S3_REGION
    s3_profile: str | None = None
    group_column: str = DEFAULT_GROUP_COLUMN
    cache_dir: Path = DEFAULT_CACHE_DIR
    chunk_size: int = DEFAULT_CHUNK_SIZE
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT_SECONDS
    read_timeout: float = DEFAULT_READ_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL
    refresh: bool = False

    @classmethod
    def from_env(
        cls,
        bucket: str | None = None,
        object_key: str | None = None,
    ) -> "TallyConfig":
        """Build config from process environment variables.

        Args:
            bucket: Optional bucket that replaces BUCKET_NAME.
            object_key: Optional object key that replaces FILE_KEY.

        Returns:
            A validated config object.

        Raises:
            TallyConfigError: If required values are missing or invalid.
        """
        object_key = object_key or _require_env(FILE_KEY_ENV)
        bucket = bucket or _require_env(BUCKET_NAME_ENV)
        cache_dir_value = os.getenv("TALLY_CACHE_DIR", str(DEFAULT_CACHE_DIR))
        return cls(
            bucket=bucket,
            object_key=object_key,
            s3_region=os.getenv("TALLY_S3_REGION") or DEFAULT_S3_REGION,
            s3_profile=os.getenv("TALLY_S3_PROFILE") or None,
            group_column=os.getenv("TALLY_GROUP_COLUMN") or DEFAULT_GROUP_COLUMN,
            cache_dir=Path(cache_dir_value).expanduser(),
            chunk_size=_parse_positive_int(
                "TALLY_CHUNK_SIZE", os.getenv("TALLY_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
            ),
            connect_timeout=_parse_positive_float(
                "TALLY_CONNECT_TIMEOUT",
                os.getenv("TALLY_CONNECT_TIMEOUT", str(DEFAULT_CONNECT_TIMEOUT_SECONDS)),
            ),
            read_timeout=_parse_positive_float(
                "TALLY_READ_TIMEOUT",
                os.getenv("TALLY_READ_TIMEOUT", str(DEFAULT_READ_TIMEOUT_SECONDS)),
            ),
            log_level=parse_log_level(os.getenv("TALLY_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Raw level name, any case.

    Returns:
        Lower-case supported level name.

    Raises:
        TallyConfigError: If the level is unknown.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise TallyConfigError(
            f"Invalid TALLY_LOG_LEVEL value: got '{raw_value}'. "
            f"Use one of {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _require_env(name: str) -> str:
    """Read a required, non-empty environment value.

    Args:
        name: Environment variable name.

    Returns:
        Stripped variable value.

    Raises:
        TallyConfigError: If variable is unset or blank.
    """
    value = os.getenv(name, "").strip()
    if not value:
        raise TallyConfigError(
            f"Missing required environment variable {name}. "
            f"Set {name} in the environment or in a .env file."
        )
    return value


def _parse_positive_int(name: str, raw_value: str) -> int:
    """Parse a strictly positive integer environment value."""
    try:
        value = int(raw_value)
    except ValueError as error:
        raise TallyConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'. "
            f"Set {name} to a positive whole number."
        ) from error
    if value <= 0:
        raise TallyConfigError(
            f"Invalid {name} value: expected a positive integer, got {value}. "
            f"Set {name} to a value greater than zero."
        )
    return value


def _parse_positive_float(name: str, raw_value: str) -> float:
    """Parse a strictly positive number of seconds."""
    try:
        value = float(raw_value)
    except ValueError as error:
        raise TallyConfigError(
            f"Invalid {name} value: expected seconds, got '{raw_value}'. "
            f"Set {name} to a positive number."
        ) from error
    if value <= 0:
        raise TallyConfigError(
            f"Invalid {name} value: expected positive seconds, got {value}. "
            f"Set {name} to a value greater than zero."
        )
    return value

"""Core constants used across Tally modules.

This module centralizes defaults and environment variable names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

FILE_KEY_ENV = "FILE_KEY"
BUCKET_NAME_ENV = "BUCKET_NAME"
DEFAULT_CACHE_DIR = Path(".")
DEFAULT_CACHE_FILE_NAME = "temp.csv"
DEFAULT_S3_REGION = "us-west-1"
DEFAULT_GROUP_COLUMN = "SIC_CODE_CATEGORY"
DEFAULT_COUNT_ALIAS = "count"
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0
DEFAULT_READ_TIMEOUT_SECONDS = 60.0
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

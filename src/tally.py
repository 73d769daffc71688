"""Public SDK surface for Tally.

This module provides a stable import path for library users.
It re-exports the runner entry points and typed models.
"""

from __future__ import annotations

from core.config import TallyConfig
from core.errors import (
    TallyConfigError,
    TallyError,
    TallyFetchError,
    TallyParseError,
    TallySchemaError,
)
from core.types import AggregationResult, FetchRequest, RunReport
from ingest.local_cache import is_cached, local_cache_path
from ingest.object_fetcher import fetch_object, stream_object_chunks
from ingest.pipeline import TallyRunner, run_tally
from ingest.s3_client import create_s3_client
from transforms.group_count import GroupCountPlan, aggregate

__all__ = [
    "AggregationResult",
    "FetchRequest",
    "GroupCountPlan",
    "RunReport",
    "TallyConfig",
    "TallyConfigError",
    "TallyError",
    "TallyFetchError",
    "TallyParseError",
    "TallyRunner",
    "TallySchemaError",
    "aggregate",
    "create_s3_client",
    "fetch_object",
    "is_cached",
    "local_cache_path",
    "run_tally",
    "stream_object_chunks",
]

"""Shared typed models.

This module defines immutable data models passed between the cache,
fetch, aggregation, and runner stages to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import polars as pl

from core.constants import DEFAULT_COUNT_ALIAS


@dataclass(frozen=True)
class FetchRequest:
    """Single object download request.

    Attributes:
        bucket: Source bucket name.
        object_key: Object key within the bucket.
        destination: Local file path written by the fetcher.
    """

    bucket: str
    object_key: str
    destination: Path

    @property
    def source_uri(self) -> str:
        """Return the request source as an ``s3://`` URI."""
        return f"s3://{self.bucket}/{self.object_key}"


@dataclass(frozen=True)
class AggregationResult:
    """Grouped row counts sorted by category value.

    Attributes:
        group_column: Column the rows were grouped by.
        frame: Materialized table of category values and counts.
        count_alias: Name of the count column in ``frame``.
    """

    group_column: str
    frame: pl.DataFrame
    count_alias: str = DEFAULT_COUNT_ALIAS

    def rows(self) -> list[tuple[Any, int]]:
        """Return (category value, count) pairs in table order."""
        return list(self.frame.select(self.group_column, self.count_alias).iter_rows())

    @property
    def estimated_size(self) -> int:
        """Return the estimated in-memory table size in bytes."""
        return self.frame.estimated_size()

    def render(self) -> str:
        """Return the table rendered as text, with every row shown."""
        with pl.Config(tbl_rows=-1):
            return str(self.frame)


@dataclass(frozen=True)
class RunReport:
    """Outcome of a complete fetch-then-aggregate run.

    Attributes:
        local_path: Cache file the aggregation read.
        downloaded: Whether the object was fetched during this run.
        byte_count: Bytes written by the fetch, or None on cache hit.
        result: Aggregated category counts.
    """

    local_path: Path
    downloaded: bool
    byte_count: int | None
    result: AggregationResult

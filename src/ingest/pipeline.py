"""Fetch-then-aggregate orchestration.

This module coordinates the cache check, object download, and grouped
count for one configured object. Errors from every stage propagate
unchanged; the CLI decides how a failure ends the process.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.config import TallyConfig
from core.logging_config import get_logger
from core.types import FetchRequest, RunReport
from ingest.local_cache import is_cached, local_cache_path
from ingest.object_fetcher import fetch_object
from ingest.s3_client import create_s3_client
from transforms.group_count import aggregate

_LOGGER = get_logger(__name__)


class TallyRunner:
    """Runner for one fetch-then-aggregate pass over a configured object."""

    def __init__(self, config: TallyConfig, s3_client: Any | None = None) -> None:
        self._config = config
        self._s3_client = s3_client

    def run(self) -> RunReport:
        """Ensure the cache file exists, aggregate it, and report counts."""
        local_path = local_cache_path(self._config.cache_dir, self._config.object_key)
        byte_count = self._ensure_local_file(local_path)
        result = aggregate(local_path, self._config.group_column)
        _LOGGER.info("aggregation_result", table=result.render())
        _LOGGER.info("Estimated size used", estimated_size=result.estimated_size)
        return RunReport(
            local_path=local_path,
            downloaded=byte_count is not None,
            byte_count=byte_count,
            result=result,
        )

    def _ensure_local_file(self, local_path: Path) -> int | None:
        if is_cached(local_path) and not self._config.refresh:
            _LOGGER.info("File already exists locally.", path=str(local_path))
            return None
        _LOGGER.info(
            "Downloading file from S3",
            bucket=self._config.bucket,
            object_key=self._config.object_key,
        )
        request = FetchRequest(
            bucket=self._config.bucket,
            object_key=self._config.object_key,
            destination=local_path,
        )
        return fetch_object(self._client(), request, self._config.chunk_size)

    def _client(self) -> Any:
        if self._s3_client is None:
            self._s3_client = create_s3_client(self._config)
        return self._s3_client


def run_tally(config: TallyConfig, s3_client: Any | None = None) -> RunReport:
    """Run one fetch-then-aggregate pass.

    Args:
        config: Validated runtime configuration.
        s3_client: Optional pre-built S3 client; created on cache miss
            when omitted.

    Returns:
        Report with cache status, fetched byte count, and counts table.
    """
    return TallyRunner(config, s3_client).run()

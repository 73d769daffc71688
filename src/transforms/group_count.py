"""Grouped row count over a cached CSV file.

This module describes the aggregation as a lazy polars plan
(scan, group, count, sort) and evaluates it only on ``run``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import polars as pl

from core.constants import DEFAULT_COUNT_ALIAS
from core.errors import TallyParseError, TallySchemaError
from core.logging_config import get_logger
from core.types import AggregationResult

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class GroupCountPlan:
    """Declarative count-by-category query over one CSV file.

    Attributes:
        csv_path: CSV file with a header row.
        group_column: Header column whose values define the groups.
        count_alias: Output column name for per-group row counts.
    """

    csv_path: Path
    group_column: str
    count_alias: str = DEFAULT_COUNT_ALIAS

    def build(self) -> pl.LazyFrame:
        """Compose the unevaluated query plan.

        Nothing is read from disk until the plan is collected.
        """
        return (
            pl.scan_csv(self.csv_path, has_header=True)
            .group_by(pl.col(self.group_column))
            .agg(pl.len().cast(pl.UInt64).alias(self.count_alias))
            .sort(self.group_column, nulls_last=True)
        )

    def run(self) -> AggregationResult:
        """Execute the plan and return the materialized counts.

        Raises:
            TallyParseError: If the file is missing, unreadable, or not CSV.
            TallySchemaError: If ``group_column`` is not in the header.
        """
        try:
            frame = self.build().collect()
        except pl.exceptions.ColumnNotFoundError as error:
            raise TallySchemaError(
                f"Column '{self.group_column}' not found in {self.csv_path}. "
                "Check the CSV header or pass a different --group-column."
            ) from error
        except (pl.exceptions.PolarsError, OSError) as error:
            raise TallyParseError(
                f"Failed to read CSV at {self.csv_path}: {error}. "
                "Delete the cached file and rerun with --refresh if it is corrupt."
            ) from error
        _LOGGER.info(
            "aggregation_completed",
            csv_path=str(self.csv_path),
            group_column=self.group_column,
            group_count=frame.height,
        )
        return AggregationResult(
            group_column=self.group_column,
            frame=frame,
            count_alias=self.count_alias,
        )


def aggregate(csv_path: Path, group_column: str) -> AggregationResult:
    """Count rows per distinct ``group_column`` value in ``csv_path``.

    Args:
        csv_path: CSV file with a header row.
        group_column: Grouping column name.

    Returns:
        Counts sorted ascending by category value.
    """
    return GroupCountPlan(csv_path=csv_path, group_column=group_column).run()

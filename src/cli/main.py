"""Tally CLI entry points.
This module maps command-line flags and ``.env`` values onto a
validated config, runs one fetch-then-aggregate pass, and prints it.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from core.config import TallyConfig
from core.errors import TallyError
from core.logging_config import configure_logging
from core.s3_uri import parse_s3_object_uri
from core.types import RunReport
from ingest.pipeline import run_tally


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Fetch a CSV object from S3 and count rows per category",
    )
    parser.add_argument(
        "--source",
        help="Object URI s3://bucket/key, overrides BUCKET_NAME and FILE_KEY",
    )
    parser.add_argument("--group-column", help="Override TALLY_GROUP_COLUMN")
    parser.add_argument("--cache-dir", help="Override TALLY_CACHE_DIR")
    parser.add_argument("--region", help="Override TALLY_S3_REGION")
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Download the object even when the local cache file exists",
    )
    parser.add_argument(
        "--env-file",
        help="Optional .env file to load instead of searching for one",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Tally CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    try:
        config = _build_config(args)
        configure_logging(config.log_level)
        report = run_tally(config)
    except TallyError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    _print_report(report)
    return 0


def _build_config(args: argparse.Namespace) -> TallyConfig:
    """Build config from environment with CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated runtime config.
    """
    bucket = object_key = None
    if args.source:
        location = parse_s3_object_uri(args.source)
        bucket, object_key = location.bucket, location.key
    config = TallyConfig.from_env(bucket=bucket, object_key=object_key)
    overrides: dict[str, object] = {"refresh": args.refresh}
    if args.group_column:
        overrides["group_column"] = args.group_column
    if args.cache_dir:
        overrides["cache_dir"] = Path(args.cache_dir).expanduser()
    if args.region:
        overrides["s3_region"] = args.region
    return replace(config, **overrides)


def _print_report(report: RunReport) -> None:
    """Print the counts table and its estimated size."""
    print(report.result.render())
    print(f"estimated_size={report.result.estimated_size}")

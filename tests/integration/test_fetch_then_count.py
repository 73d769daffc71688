"""Integration test for a full run against a stubbed boto3 client."""

from __future__ import annotations

import io
from pathlib import Path

from botocore.response import StreamingBody
from botocore.stub import Stubber

from core.config import TallyConfig
from ingest.pipeline import run_tally
from ingest.s3_client import create_s3_client
from tests.fixture_paths import fixture_path


def test_run_fetches_with_real_client_then_serves_from_cache(tmp_path: Path) -> None:
    """First run should stream the object; second run should hit the cache."""
    config = TallyConfig(
        bucket="company-data",
        object_key="exports/2024/companies.csv",
        cache_dir=tmp_path,
        chunk_size=16,
    )
    payload = fixture_path("csv/categories.csv").read_bytes()
    client = create_s3_client(config)
    stubber = Stubber(client)
    stubber.add_response(
        "get_object",
        {
            "Body": StreamingBody(io.BytesIO(payload), len(payload)),
            "ContentLength": len(payload),
        },
        {"Bucket": "company-data", "Key": "exports/2024/companies.csv"},
    )

    with stubber:
        first = run_tally(config, client)
        second = run_tally(config, client)

    stubber.assert_no_pending_responses()
    assert first.downloaded is True and first.byte_count == len(payload)
    assert second.downloaded is False
    assert first.result.rows() == second.result.rows() == [("A", 3), ("B", 2), ("C", 1)]

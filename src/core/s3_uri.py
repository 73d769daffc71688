"""S3 URI parsing helpers.

This module turns ``s3://bucket/key`` strings into typed locations.
It keeps URI validation behavior consistent for CLI overrides.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import TallyConfigError


@dataclass(frozen=True)
class S3ObjectLocation:
    """Parsed S3 object location model."""

    bucket: str
    key: str


def parse_s3_object_uri(uri: str) -> S3ObjectLocation:
    """Parse and validate an S3 object URI.

    Args:
        uri: URI in format ``s3://bucket/key``.

    Returns:
        Parsed bucket and key pair.

    Raises:
        TallyConfigError: If the URI has no scheme, bucket, or key.
    """
    if not uri.startswith("s3://"):
        _raise_uri_error(uri)
    stripped_uri = uri.removeprefix("s3://")
    if "/" not in stripped_uri:
        _raise_uri_error(uri)
    bucket, key = stripped_uri.split("/", 1)
    if not bucket or not key:
        _raise_uri_error(uri)
    return S3ObjectLocation(bucket=bucket, key=key)


def _raise_uri_error(uri: str) -> None:
    """Raise an invalid object URI error.

    Args:
        uri: Invalid URI value.

    Raises:
        TallyConfigError: Always.
    """
    raise TallyConfigError(
        f"Invalid S3 URI '{uri}': expected s3://bucket/key. "
        "Provide both bucket and object key."
    )

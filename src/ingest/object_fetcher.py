"""Streaming object download into the local cache.

This module exposes the object body as a finite sequence of byte chunks
and drains that sequence into the destination file one chunk at a time,
so memory use is bounded by the chunk size rather than the object size.
"""

from __future__ import annotations

from typing import Any, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from core.errors import TallyFetchError
from core.logging_config import get_logger
from core.types import FetchRequest

_LOGGER = get_logger(__name__)


def stream_object_chunks(
    s3_client: Any,
    request: FetchRequest,
    chunk_size: int,
) -> Iterator[bytes]:
    """Yield the object body for ``request`` in sequential chunks.

    Args:
        s3_client: Boto3 S3 client.
        request: Bucket and key to read.
        chunk_size: Maximum bytes per yielded chunk.

    Yields:
        Non-empty byte chunks in object order.

    Raises:
        TallyFetchError: If the object request or body stream fails.
    """
    try:
        response = s3_client.get_object(Bucket=request.bucket, Key=request.object_key)
    except ClientError as error:
        code = error.response.get("Error", {}).get("Code", "Unknown")
        raise TallyFetchError(
            f"Failed to get {request.source_uri}: {code}. "
            "Check that the object exists and the credentials can read it."
        ) from error
    except BotoCoreError as error:
        raise TallyFetchError(
            f"Failed to connect for {request.source_uri}: {error}. "
            "Check network access and the configured region."
        ) from error
    body = response["Body"]
    try:
        for chunk in body.iter_chunks(chunk_size=chunk_size):
            if chunk:
                yield chunk
    except BotoCoreError as error:
        raise TallyFetchError(
            f"Stream for {request.source_uri} was interrupted: {error}. "
            "The local file may be incomplete; rerun with --refresh."
        ) from error
    finally:
        body.close()


def fetch_object(s3_client: Any, request: FetchRequest, chunk_size: int) -> int:
    """Download an object to ``request.destination``.

    The destination is created (or truncated) before the object is
    requested. A failed fetch may leave a partial file behind.

    Args:
        s3_client: Boto3 S3 client.
        request: Bucket, key, and destination path.
        chunk_size: Maximum bytes held in memory at once.

    Returns:
        Total number of bytes written.

    Raises:
        TallyFetchError: If the file cannot be written or the download fails.
    """
    _LOGGER.debug(
        "fetch_started",
        bucket=request.bucket,
        object_key=request.object_key,
        destination=str(request.destination),
    )
    try:
        destination = request.destination.open("wb")
    except OSError as error:
        raise TallyFetchError(
            f"Failed to create {request.destination}: {error.strerror or error}. "
            "Check that the cache directory exists and is writable."
        ) from error
    byte_count = 0
    try:
        with destination:
            for chunk in stream_object_chunks(s3_client, request, chunk_size):
                destination.write(chunk)
                _LOGGER.debug("chunk_written", chunk_bytes=len(chunk))
                byte_count += len(chunk)
    except OSError as error:
        raise TallyFetchError(
            f"Failed to write {request.destination}: {error.strerror or error}. "
            "Free disk space or choose another cache directory."
        ) from error
    _LOGGER.info(
        "object_fetched",
        source_uri=request.source_uri,
        destination=str(request.destination),
        byte_count=byte_count,
    )
    return byte_count


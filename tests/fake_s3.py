"""In-memory S3 client doubles for fetch tests."""

from __future__ import annotations

from typing import Iterator, Sequence

from botocore.exceptions import ClientError, ReadTimeoutError


class ChunkedBody:
    """Response body that yields pre-split chunks regardless of chunk size."""

    def __init__(self, chunks: Sequence[bytes], fail_after: int | None = None) -> None:
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self.closed = False

    def iter_chunks(self, chunk_size: int = 1024) -> Iterator[bytes]:
        for index, chunk in enumerate(self._chunks):
            if self._fail_after is not None and index >= self._fail_after:
                raise ReadTimeoutError(endpoint_url="https://s3.us-west-1.amazonaws.com")
            yield chunk

    def close(self) -> None:
        self.closed = True


class FakeS3Client:
    """Minimal ``get_object`` stand-in keyed by (bucket, key)."""

    def __init__(self, objects: dict[tuple[str, str], ChunkedBody] | None = None) -> None:
        self._objects = objects or {}
        self.calls: list[tuple[str, str]] = []

    def get_object(self, Bucket: str, Key: str) -> dict[str, object]:
        self.calls.append((Bucket, Key))
        body = self._objects.get((Bucket, Key))
        if body is None:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        return {"Body": body}

"""Object ingestion into the local cache.

This package resolves the cache file, downloads missing objects from
S3, and runs the fetch-then-aggregate pass.
"""

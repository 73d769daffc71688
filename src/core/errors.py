"""Tally exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class TallyError(Exception):
    """Base exception for all Tally failures."""


class TallyConfigError(TallyError):
    """Raised for missing or invalid runtime configuration."""


class TallyFetchError(TallyError):
    """Raised when downloading an object to the local cache fails."""


class TallyParseError(TallyError):
    """Raised when the cached CSV cannot be read or parsed."""


class TallySchemaError(TallyError):
    """Raised when the grouping column is absent from the CSV header."""

from __future__ import annotations


class AgedCacheError(Exception):
    """Base error for the aged cache."""


class InvalidArgumentError(AgedCacheError, ValueError):
    """Raised when a caller passes a missing or malformed argument."""

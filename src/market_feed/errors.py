"""Error taxonomy for the market feed pipeline.

Per-instrument failures (transport, status, decode, empty payload,
conversion) are caught inside the pipeline and turned into skips. Only the
batch-level sentinels reach callers, carried on a ``BatchResult``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FeedError(Exception):
    """Base class for every error raised by the feed."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class TransportError(FeedError):
    """The provider could not be reached."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url


class StatusError(FeedError):
    """The provider answered with a non-success status code."""

    def __init__(self, message: str, status_code: int, url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.url = url


class DecodeError(FeedError):
    """The response body did not match the expected schema."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url


class EmptyResultError(FeedError):
    """A well-formed payload without any result entries."""

    def __init__(self, message: str, symbol: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol


class ConversionError(FeedError):
    """The USD exchange rate for a currency could not be fetched."""

    def __init__(self, message: str, currency: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.currency = currency


class PoolError(FeedError):
    """The worker pool itself failed, as opposed to one of its tasks."""


class BatchError(FeedError):
    """Aggregate outcome of a batch that did not fully succeed."""


class NoContentError(BatchError):
    def __init__(self, message: str = "no data available", **kwargs):
        super().__init__(message, **kwargs)


class PartialContentError(BatchError):
    def __init__(self, failed: int, **kwargs):
        super().__init__(
            f"partial data available: could not fetch data for {failed} market(s)",
            **kwargs,
        )
        self.failed = failed


__all__ = [
    "BatchError",
    "ConversionError",
    "DecodeError",
    "EmptyResultError",
    "FeedError",
    "NoContentError",
    "PartialContentError",
    "PoolError",
    "StatusError",
    "TransportError",
]

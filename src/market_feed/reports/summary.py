"""Helpers to build serialisable reports of a batch."""

from __future__ import annotations

from ..errors import NoContentError, PartialContentError
from ..markets import BatchResult, MarketSummary


def _status(result: BatchResult) -> str:
    if isinstance(result.error, NoContentError):
        return "no_content"
    if isinstance(result.error, PartialContentError):
        return "partial_content"
    return "ok"


def _summary_payload(summary: MarketSummary) -> dict:
    return {
        "symbol": summary.symbol,
        "name": summary.request.label,
        "requested_currency": summary.request.currency,
        "price": float(summary.price),
        "currency_symbol": summary.currency_symbol,
        "percent_change": float(summary.percent_change),
        "chart_points": summary.polyline,
    }


def build_batch_report(result: BatchResult) -> dict:
    return {
        "status": _status(result),
        "error": str(result.error) if result.error else None,
        "failed": result.failed,
        "markets": [_summary_payload(summary) for summary in result.summaries],
    }

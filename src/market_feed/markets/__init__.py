"""Market aggregation and chart helpers."""

from .aggregator import BatchResult, FailureRecorder, LoggingFailureRecorder, MarketAggregator, MarketSummary
from .charts import format_polyline, percent_change, svg_polyline_coords, without_zero_values
from .sorting import sort_summaries

__all__ = [
    "BatchResult",
    "FailureRecorder",
    "LoggingFailureRecorder",
    "MarketAggregator",
    "MarketSummary",
    "format_polyline",
    "percent_change",
    "sort_summaries",
    "svg_polyline_coords",
    "without_zero_values",
]

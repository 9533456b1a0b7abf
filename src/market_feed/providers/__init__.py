"""Quote providers."""

from .base import InstrumentRequest, QuoteProvider, QuoteResponse
from .schema import ChartResponse
from .yahoo import YahooChartProvider, build_provider, build_session

__all__ = [
    "ChartResponse",
    "InstrumentRequest",
    "QuoteProvider",
    "QuoteResponse",
    "YahooChartProvider",
    "build_provider",
    "build_session",
]

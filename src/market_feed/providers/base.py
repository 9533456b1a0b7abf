"""Provider abstraction to isolate quote sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Tuple

import requests


@dataclass(frozen=True)
class InstrumentRequest:
    symbol: str
    currency: Optional[str] = None
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or self.symbol


@dataclass(frozen=True)
class QuoteResponse:
    currency: str
    symbol: str
    latest_price: float
    previous_close: float
    prices: Tuple[float, ...] = field(default_factory=tuple)


class ChartPayload(Protocol):
    def to_quote(self, symbol: Optional[str] = None) -> QuoteResponse:
        """Return the first result as a quote, raising EmptyResultError if none."""


class QuoteProvider(Protocol):
    name: str

    def chart_request(self, instrument: InstrumentRequest) -> requests.Request:
        """Build the outbound chart request for one instrument."""

    def chart_task(self) -> Callable[[requests.Request], ChartPayload]:
        """Return the pool task executing and decoding a chart request."""

    def fetch_usd_rate(self, currency: str) -> float:
        """Fetch the USD -> ``currency`` exchange rate."""


__all__ = ["ChartPayload", "InstrumentRequest", "QuoteProvider", "QuoteResponse"]

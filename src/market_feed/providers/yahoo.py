"""Yahoo Finance chart provider implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

import requests

from ..errors import ConversionError, FeedError
from ..pool.tasks import decode_json_task, fetch_and_decode
from .base import InstrumentRequest, QuoteProvider
from .schema import ChartResponse

if TYPE_CHECKING:
    from ..config.loader import ProviderConfig

logger = logging.getLogger(__name__)


class YahooChartProvider(QuoteProvider):
    name = "yahoo"

    def __init__(self, config: ProviderConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or build_session(config)

    def chart_url(self, symbol: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/v8/finance/chart/{symbol}"

    def chart_request(self, instrument: InstrumentRequest) -> requests.Request:
        return requests.Request(
            "GET",
            self.chart_url(instrument.symbol),
            params={"range": self.config.chart_range, "interval": self.config.chart_interval},
        )

    def chart_task(self) -> Callable[[requests.Request], ChartResponse]:
        return decode_json_task(self.session, ChartResponse, self.config.timeout)

    def fetch_usd_rate(self, currency: str) -> float:
        """Fetch how many units of ``currency`` one US dollar buys.

        Runs on the caller's thread, outside the worker pool. Any failure
        (transport, status, decode or an empty payload) is raised as a
        ``ConversionError`` chained to its cause.
        """
        request = requests.Request(
            "GET",
            self.chart_url(f"USD{currency}=X"),
            params={"range": self.config.rate_range, "interval": self.config.rate_interval},
        )
        try:
            response = fetch_and_decode(self.session, request, ChartResponse, self.config.timeout)
            quote = response.to_quote(f"USD{currency}=X")
        except FeedError as exc:
            raise ConversionError(
                f"failed to fetch USD exchange rate for {currency}: {exc}", currency=currency
            ) from exc
        logger.debug("USD/%s rate %s", currency, quote.latest_price)
        return quote.latest_price


def build_session(config: ProviderConfig) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent, "Accept": "application/json"})
    return session


def build_provider(config: ProviderConfig, session: requests.Session | None = None) -> YahooChartProvider:
    return YahooChartProvider(config, session=session)

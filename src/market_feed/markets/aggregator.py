"""Batch aggregation of provider quotes into market summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, Sequence, Tuple

import requests

from ..config.loader import ChartConfig, ConfigBundle
from ..errors import (
    BatchError,
    ConversionError,
    EmptyResultError,
    NoContentError,
    PartialContentError,
    PoolError,
)
from ..pool import DEFAULT_WORKERS, Job, run_job
from ..providers.base import ChartPayload, InstrumentRequest, QuoteProvider
from ..providers.yahoo import build_provider
from .charts import Point, format_polyline, percent_change, svg_polyline_coords, without_zero_values

logger = logging.getLogger(__name__)

BASE_CURRENCY = "USD"


@dataclass(frozen=True)
class MarketSummary:
    request: InstrumentRequest
    price: float
    currency_symbol: str
    percent_change: float
    chart_points: Tuple[Point, ...] = ()

    @property
    def symbol(self) -> str:
        return self.request.symbol

    @property
    def polyline(self) -> str:
        return format_polyline(self.chart_points)


@dataclass(frozen=True)
class BatchResult:
    summaries: Tuple[MarketSummary, ...] = ()
    error: Optional[BatchError] = None
    failed: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def partial(self) -> bool:
        return isinstance(self.error, PartialContentError)

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class FailureRecorder(Protocol):
    def record_failure(self, symbol: str, cause: Exception) -> None:
        """Observe an instrument that produced no summary."""


class LoggingFailureRecorder:
    def record_failure(self, symbol: str, cause: Exception) -> None:
        logger.error("Failed to fetch market data for %s: %s", symbol, cause)


class MarketAggregator:
    """Fetch every instrument concurrently and summarise what came back."""

    def __init__(
        self,
        provider: QuoteProvider,
        currency_symbols: Mapping[str, str],
        recorder: FailureRecorder | None = None,
        chart: ChartConfig | None = None,
        workers: int = DEFAULT_WORKERS,
    ):
        self.provider = provider
        self.currency_symbols = MappingProxyType(dict(currency_symbols))
        self.recorder = recorder or LoggingFailureRecorder()
        self.chart = chart or ChartConfig()
        self.workers = workers

    @classmethod
    def from_config(
        cls,
        config: ConfigBundle,
        session: requests.Session | None = None,
        recorder: FailureRecorder | None = None,
    ) -> "MarketAggregator":
        return cls(
            build_provider(config.provider, session=session),
            config.currency_table(),
            recorder=recorder,
            chart=config.chart,
            workers=config.provider.workers,
        )

    def aggregate(self, instruments: Sequence[InstrumentRequest]) -> BatchResult:
        """Summarise ``instruments`` in input order.

        Failed instruments are skipped and reported to the recorder. The
        result carries ``NoContentError`` when nothing could be summarised
        and ``PartialContentError`` when only some instruments failed.
        """
        job = Job(
            task=self.provider.chart_task(),
            inputs=[self.provider.chart_request(instrument) for instrument in instruments],
            workers=self.workers,
        )
        try:
            outcomes = run_job(job)
        except PoolError as exc:
            logger.error("Worker pool failed: %s", exc)
            error = NoContentError(f"no data available: {exc}")
            error.__cause__ = exc
            return BatchResult(error=error)

        summaries: list[MarketSummary] = []
        failed = 0
        for instrument, outcome in zip(instruments, outcomes):
            if not outcome.ok:
                failed += 1
                self.recorder.record_failure(instrument.symbol, outcome.error)
                continue
            try:
                summary = self._summarize(instrument, outcome.value)
            except (EmptyResultError, ConversionError) as exc:
                failed += 1
                self.recorder.record_failure(instrument.symbol, exc)
                continue
            summaries.append(summary)

        if not summaries:
            logger.warning("No market data available for %d instrument(s)", len(instruments))
            return BatchResult(error=NoContentError(), failed=failed)
        if failed:
            logger.warning("Fetched %d of %d market(s)", len(summaries), len(instruments))
            return BatchResult(tuple(summaries), PartialContentError(failed), failed)
        logger.info("Fetched %d market(s)", len(summaries))
        return BatchResult(tuple(summaries))

    def _summarize(self, instrument: InstrumentRequest, payload: ChartPayload) -> MarketSummary:
        quote = payload.to_quote(instrument.symbol)
        prices = quote.prices[-self.chart.window:]

        previous = quote.previous_close
        # Non-trading days show up as zero placeholders.
        if len(prices) >= 2 and prices[-2] != 0:
            previous = prices[-2]

        price = quote.latest_price
        points = svg_polyline_coords(self.chart.width, self.chart.height, without_zero_values(prices))
        currency = self.currency_symbols.get(quote.currency, quote.currency)

        preferred = instrument.currency
        # Only USD-quoted instruments are converted; other pairs are left as reported.
        if preferred and preferred != quote.currency and quote.currency == BASE_CURRENCY:
            rate = self.provider.fetch_usd_rate(preferred)
            price *= rate
            previous *= rate
            currency = self.currency_symbols.get(preferred, preferred)

        return MarketSummary(
            request=instrument,
            price=price,
            currency_symbol=currency,
            percent_change=percent_change(price, previous),
            chart_points=tuple(points),
        )

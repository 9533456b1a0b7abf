"""Wire schema of the chart endpoint."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..errors import EmptyResultError
from .base import QuoteResponse


class ChartMeta(BaseModel):
    currency: str = ""
    symbol: str = ""
    regular_market_price: float = Field(0.0, alias="regularMarketPrice")
    chart_previous_close: float = Field(0.0, alias="chartPreviousClose")

    @field_validator("currency", "symbol", "regular_market_price", "chart_previous_close", mode="before")
    @classmethod
    def _null_to_default(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class QuoteSeries(BaseModel):
    close: List[float] = Field(default_factory=list)

    @field_validator("close", mode="before")
    @classmethod
    def _fill_gaps(cls, value):
        # Missing trading days come back as null; keep them as zero placeholders.
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [0.0 if item is None else item for item in value]


class ChartIndicators(BaseModel):
    quote: List[QuoteSeries] = Field(default_factory=list)

    @field_validator("quote", mode="before")
    @classmethod
    def _null_quote(cls, value):
        return [] if value is None else value


class ChartResult(BaseModel):
    meta: ChartMeta
    indicators: ChartIndicators = Field(default_factory=ChartIndicators)


class Chart(BaseModel):
    result: List[ChartResult] = Field(default_factory=list)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value):
        return [] if value is None else value


class ChartResponse(BaseModel):
    chart: Chart

    def first_result(self) -> Optional[ChartResult]:
        if not self.chart.result:
            return None
        return self.chart.result[0]

    def to_quote(self, symbol: Optional[str] = None) -> QuoteResponse:
        result = self.first_result()
        if result is None:
            raise EmptyResultError("no result in response", symbol=symbol)
        quotes = result.indicators.quote
        return QuoteResponse(
            currency=result.meta.currency,
            symbol=result.meta.symbol,
            latest_price=result.meta.regular_market_price,
            previous_close=result.meta.chart_previous_close,
            prices=tuple(quotes[0].close) if quotes else (),
        )


__all__ = ["Chart", "ChartIndicators", "ChartMeta", "ChartResponse", "ChartResult", "QuoteSeries"]

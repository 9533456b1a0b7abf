"""Load YAML configuration bundles for the feed."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..providers.base import InstrumentRequest

load_dotenv()

CONFIG_DIR = Path("configs")
DEFAULT_CONFIG_PATH = CONFIG_DIR / "feed.yml"

DEFAULT_CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "USD": "$",
        "EUR": "€",
        "JPY": "¥",
        "CAD": "C$",
        "AUD": "A$",
        "GBP": "£",
        "CHF": "Fr",
        "NZD": "N$",
        "INR": "₹",
        "BRL": "R$",
        "RUB": "₽",
        "TRY": "₺",
        "ZAR": "R",
        "CNY": "¥",
        "KRW": "₩",
        "HKD": "HK$",
        "SGD": "S$",
        "SEK": "kr",
        "NOK": "kr",
        "DKK": "kr",
        "PLN": "zł",
        "PHP": "₱",
    }
)


class ProviderConfig(BaseModel):
    id: str = Field("yahoo", description="Provider identifier")
    base_url: str = "https://query1.finance.yahoo.com"
    chart_range: str = "1mo"
    chart_interval: str = "1d"
    rate_range: str = "1d"
    rate_interval: str = "1d"
    timeout: float = 15
    workers: int = Field(10, ge=1)
    user_agent: str = "Mozilla/5.0 (compatible; market-feed)"


class ChartConfig(BaseModel):
    window: int = Field(21, ge=1, description="Most-recent points kept for the chart")
    width: float = 100
    height: float = 50


class MarketEntry(BaseModel):
    symbol: str
    name: Optional[str] = None
    currency: Optional[str] = None

    def to_request(self) -> InstrumentRequest:
        return InstrumentRequest(symbol=self.symbol, currency=self.currency or None, name=self.name)


class WatchlistConfig(BaseModel):
    name: str = "default"
    sort_by: Literal["none", "change", "absolute-change"] = "none"
    markets: list[MarketEntry] = Field(default_factory=list)

    def requests(self) -> list[InstrumentRequest]:
        return [entry.to_request() for entry in self.markets]


class ConfigBundle(BaseModel):
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    watchlist: WatchlistConfig = Field(default_factory=WatchlistConfig)
    currency_symbols: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CURRENCY_SYMBOLS))

    def currency_table(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self.currency_symbols))


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _merge_dict(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dict(base.get(key, {}), value)
        else:
            base[key] = value
    return base


def resolve_config_path(path: Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv("MARKET_FEED_CONFIG")
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_config_bundle(path: Path | None = None) -> ConfigBundle:
    """Load the bundle from YAML, falling back to defaults for a missing file.

    ``currency_symbols`` from the file is layered on top of the built-in
    table rather than replacing it.
    """
    file_path = resolve_config_path(path)
    data = load_yaml(file_path) if file_path.exists() else {}
    symbols = _merge_dict(dict(DEFAULT_CURRENCY_SYMBOLS), data.get("currency_symbols") or {})
    return ConfigBundle(
        provider=ProviderConfig(**(data.get("provider") or {})),
        chart=ChartConfig(**(data.get("chart") or {})),
        watchlist=WatchlistConfig(**(data.get("watchlist") or {})),
        currency_symbols=symbols,
    )

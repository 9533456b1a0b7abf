"""Configuration models and loaders."""

from .loader import (
    DEFAULT_CURRENCY_SYMBOLS,
    ChartConfig,
    ConfigBundle,
    MarketEntry,
    ProviderConfig,
    WatchlistConfig,
    load_config_bundle,
)

__all__ = [
    "DEFAULT_CURRENCY_SYMBOLS",
    "ChartConfig",
    "ConfigBundle",
    "MarketEntry",
    "ProviderConfig",
    "WatchlistConfig",
    "load_config_bundle",
]

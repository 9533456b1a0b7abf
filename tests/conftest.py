import json
import sys
import threading
from pathlib import Path
from urllib.parse import unquote, urlsplit

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from market_feed.config.loader import ChartConfig, ProviderConfig  # noqa: E402
from market_feed.markets import MarketAggregator  # noqa: E402
from market_feed.providers import YahooChartProvider  # noqa: E402

BASE_URL = "https://quotes.test"


def chart_path(symbol: str) -> str:
    return f"/v8/finance/chart/{symbol}"


def chart_payload(symbol, currency="USD", price=100.0, previous_close=95.0, closes=None):
    return {
        "chart": {
            "result": [
                {
                    "meta": {
                        "currency": currency,
                        "symbol": symbol,
                        "regularMarketPrice": price,
                        "chartPreviousClose": previous_close,
                        "exchangeName": "TEST",
                    },
                    "indicators": {"quote": [{"close": list(closes or [])}]},
                }
            ],
            "error": None,
        }
    }


def empty_payload():
    return {"chart": {"result": None, "error": {"code": "Not Found", "description": "No data"}}}


class FakeSession(requests.Session):
    """Session answering from canned routes keyed by URL path."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.calls = []
        self._lock = threading.Lock()

    def add_json(self, path, payload, status=200):
        self.routes[path] = (status, json.dumps(payload).encode("utf-8"))

    def add_body(self, path, body: bytes, status=200):
        self.routes[path] = (status, body)

    def add_error(self, path, error: Exception):
        self.routes[path] = error

    def called(self, path) -> bool:
        return any(unquote(urlsplit(url).path) == path for url in self.calls)

    def send(self, request, **kwargs):
        with self._lock:
            self.calls.append(request.url)
        route = self.routes.get(unquote(urlsplit(request.url).path))
        if route is None:
            route = (404, b'{"chart": {"result": null}}')
        if isinstance(route, Exception):
            raise route
        status, body = route
        response = requests.Response()
        response.status_code = status
        response._content = body
        response._content_consumed = True
        response.url = request.url
        response.request = request
        return response


class RecordingRecorder:
    def __init__(self):
        self.failures = []

    def record_failure(self, symbol, cause):
        self.failures.append((symbol, cause))

    @property
    def symbols(self):
        return [symbol for symbol, _ in self.failures]


@pytest.fixture()
def session():
    return FakeSession()


@pytest.fixture()
def provider_config():
    return ProviderConfig(base_url=BASE_URL, timeout=1, workers=4)


@pytest.fixture()
def provider(provider_config, session):
    return YahooChartProvider(provider_config, session=session)


@pytest.fixture()
def recorder():
    return RecordingRecorder()


@pytest.fixture()
def currency_symbols():
    return {"USD": "$", "EUR": "€", "GBP": "£"}


@pytest.fixture()
def aggregator(provider, currency_symbols, recorder, provider_config):
    return MarketAggregator(
        provider,
        currency_symbols,
        recorder=recorder,
        chart=ChartConfig(window=21, width=100, height=50),
        workers=provider_config.workers,
    )

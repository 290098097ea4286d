"""Public interface for the cnb_rates package."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from importlib import metadata as importlib_metadata
from typing import Callable, Iterable, Iterator
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from cnb_rates.cache.daily_cache import DailyCache
from cnb_rates.errors import CNBRatesError, DataError, FetchError, ParseError
from cnb_rates.ingestion.cnb_client import (
    CNB_DAILY_RATES_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    CNBFeedClient,
)
from cnb_rates.ingestion.cnb_xml import CNBXMLParser
from cnb_rates.ingestion.models import BankRatesDocument
from cnb_rates.ingestion.strategy import FeedSource
from cnb_rates.models import Currency, ExchangeRate
from cnb_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

HOME_CURRENCY = "CZK"

__all__ = [
    "__version__",
    "HOME_CURRENCY",
    "BankRatesDocument",
    "CNBFeedClient",
    "CNBRatesError",
    "CNBXMLParser",
    "Currency",
    "DailyCache",
    "DataError",
    "ExchangeRate",
    "ExchangeRateProvider",
    "FeedConfig",
    "FetchError",
    "ParseError",
]

try:
    __version__ = importlib_metadata.version("cnb-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


@dataclass(slots=True)
class FeedConfig:
    """Where and how the provider downloads the daily rates document."""

    base_url: str = CNB_DAILY_RATES_URL
    timeout: float = DEFAULT_TIMEOUT
    home_currency: str = HOME_CURRENCY
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_url(cls, url: str, **overrides) -> "FeedConfig":
        """Build a config from a feed URL, dropping any ``date`` query parameter."""

        parsed = urlparse(url.strip())
        if parsed.scheme.lower() not in {"http", "https"} or not parsed.netloc:
            raise ValueError("Feed URL must be an absolute http:// or https:// URL")
        # The client appends ``date`` itself on every request.
        query = [(key, value) for key, value in parse_qsl(parsed.query) if key.lower() != "date"]
        cleaned = urlunparse(parsed._replace(query=urlencode(query)))
        return cls(base_url=cleaned, **overrides)


class ExchangeRateProvider:
    """Serve today's CNB exchange rates for a requested set of currencies.

    Only the pairs the CNB itself publishes (``CZK`` against each listed
    currency) are returned. Nothing is inverted or cross-computed, and
    currencies missing from the day's document are skipped.
    """

    __slots__ = ("config", "client", "parser", "cache", "_today", "_owns_client")

    def __init__(
        self,
        config: FeedConfig | str | None = None,
        *,
        client: FeedSource | None = None,
        parser: CNBXMLParser | None = None,
        cache: DailyCache[BankRatesDocument] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Wire the provider together.

        ``config`` may be a :class:`FeedConfig` or a feed URL; when omitted
        the public CNB endpoint is used. ``client``, ``cache`` and ``today``
        can be injected so that several providers share one cache or so that
        tests control the network and the clock.
        """

        self.config = self._build_config(config)
        self._owns_client = client is None
        self.client: FeedSource = client or CNBFeedClient.from_config(self.config)
        self.parser = parser or CNBXMLParser()
        self.cache: DailyCache[BankRatesDocument] = cache if cache is not None else DailyCache()
        self._today = today

    @staticmethod
    def _build_config(config: FeedConfig | str | None) -> FeedConfig:
        if isinstance(config, FeedConfig):
            return config
        if isinstance(config, str):
            return FeedConfig.from_url(config)
        return FeedConfig()

    @property
    def home_currency(self) -> Currency:
        return Currency(self.config.home_currency)

    def get_bank_rates(self) -> BankRatesDocument:
        """Return today's document, downloading it on the first call of the day."""

        day = self._today()
        return self.cache.get_or_fetch(day, lambda: self._load(day))

    def _load(self, day: date) -> BankRatesDocument:
        document = self.parser.parse(self.client.fetch(day))
        # Surface locale or volume problems before the document is cached.
        normalised = document.normalise()
        LOGGER.info(
            "Loaded %s rates for %s (table %s, #%s)",
            len(normalised.rows),
            normalised.rate_date,
            normalised.table_type,
            normalised.order,
        )
        return document

    def get_exchange_rates(self, currencies: Iterable[Currency | str]) -> Iterator[ExchangeRate]:
        """Return the source-defined rates for ``currencies``.

        The day's document is loaded before this method returns, so fetch and
        parse failures are raised here rather than on iteration.
        """

        document = self.get_bank_rates()
        wanted = {self._currency_key(currency) for currency in currencies}
        return self._filter_rates(document, wanted)

    def _filter_rates(self, document: BankRatesDocument, wanted: set[str]) -> Iterator[ExchangeRate]:
        home = self.home_currency
        for row in document.rows:
            if row.code.upper() not in wanted:
                continue
            yield ExchangeRate(home, Currency(row.code), row.per_unit_rate)

    @staticmethod
    def _currency_key(currency: Currency | str) -> str:
        if isinstance(currency, Currency):
            return currency.key
        return Currency(currency).key

    def close(self) -> None:
        """Release the HTTP session when the provider created the client."""

        if self._owns_client and isinstance(self.client, CNBFeedClient):
            self.client.close()

    def __enter__(self) -> "ExchangeRateProvider":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

"""HTTP client for the CNB daily exchange rate feed."""

from __future__ import annotations

import io
from datetime import date
from typing import TYPE_CHECKING, BinaryIO, Optional

import requests

from cnb_rates.errors import FetchError
from cnb_rates.utils.dates import format_query_date
from cnb_rates.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from cnb_rates import FeedConfig

LOGGER = get_logger(__name__)

CNB_DAILY_RATES_URL = (
    "https://www.cnb.cz/cs/financni_trhy/devizovy_trh/kurzy_devizoveho_trhu/denni_kurz.xml"
)
DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "cnb-rates/0.1"


class CNBFeedClient:
    """Download the CNB daily rates XML for a given day."""

    def __init__(
        self,
        *,
        base_url: str = CNB_DAILY_RATES_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.base_url = base_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", user_agent)
        self.session.headers.setdefault("Accept", "application/xml,text/xml;q=0.9,*/*;q=0.8")

    @classmethod
    def from_config(
        cls, config: "FeedConfig", *, session: Optional[requests.Session] = None
    ) -> "CNBFeedClient":
        return cls(
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
            session=session,
        )

    def fetch(self, day: date) -> BinaryIO:
        """Return the rates document published for ``day`` as a byte stream."""

        params = {"date": format_query_date(day)}
        LOGGER.info("Fetching CNB rates for %s from %s", params["date"], self.base_url)
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.Timeout as exc:
            LOGGER.warning("CNB request timed out after %ss: %s", self.timeout, exc)
            raise FetchError(
                f"CNB feed timed out after {self.timeout}s", url=self.base_url
            ) from exc
        except requests.RequestException as exc:
            LOGGER.warning("CNB request failed: %s", exc)
            raise FetchError(f"Unable to reach CNB feed: {exc}", url=self.base_url) from exc
        self._raise_with_context(response)
        return io.BytesIO(response.content)

    def _raise_with_context(self, response: requests.Response) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            url = response.url or self.base_url
            LOGGER.warning("CNB feed responded with HTTP %s for %s", status, url)
            raise FetchError(
                f"CNB feed responded with HTTP {status} for {url}", url=url, status=status
            ) from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CNBFeedClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["CNB_DAILY_RATES_URL", "DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "CNBFeedClient"]

"""Print today's CNB exchange rates for the given currencies."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cnb_rates import ExchangeRateProvider, FeedConfig
from cnb_rates.errors import CNBRatesError
from cnb_rates.ingestion.cnb_client import CNB_DAILY_RATES_URL, DEFAULT_TIMEOUT
from cnb_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "currencies",
        nargs="+",
        metavar="CODE",
        help="Currency codes to look up, e.g. USD EUR JPY (case-insensitive)",
    )
    parser.add_argument(
        "--url",
        default=CNB_DAILY_RATES_URL,
        help="Daily rates feed URL",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = FeedConfig.from_url(args.url, timeout=args.timeout)
    with ExchangeRateProvider(config) as provider:
        try:
            rates = list(provider.get_exchange_rates(args.currencies))
        except CNBRatesError as exc:
            LOGGER.error("Unable to load CNB rates: %s", exc)
            return 1
    for rate in rates:
        print(rate)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())

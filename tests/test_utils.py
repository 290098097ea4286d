from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from cnb_rates.errors import ParseError
from cnb_rates.utils.dates import format_query_date, parse_cnb_date, truncate_to_day
from cnb_rates.utils.logger import get_logger
from cnb_rates.utils.numbers import parse_czech_decimal


def test_truncate_to_day_drops_time() -> None:
    assert truncate_to_day(datetime(2026, 10, 19, 23, 59, 1)) == date(2026, 10, 19)
    assert truncate_to_day(date(2026, 10, 19)) == date(2026, 10, 19)


def test_format_query_date_zero_pads() -> None:
    assert format_query_date(date(2026, 1, 5)) == "05.01.2026"


@pytest.mark.parametrize("value", ["32.1.2026", "1/1/2026", "", "1.1.26"])
def test_parse_cnb_date_rejects_invalid(value: str) -> None:
    with pytest.raises(ParseError):
        parse_cnb_date(value)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("24,500", Decimal("24.500")),
        ("1 234,5", Decimal("1234.5")),
        ("1\u00a0234,5", Decimal("1234.5")),
        ("7", Decimal("7")),
        ("-0,25", Decimal("-0.25")),
    ],
)
def test_parse_czech_decimal(value: str, expected: Decimal) -> None:
    assert parse_czech_decimal(value) == expected


@pytest.mark.parametrize("value", ["24.500", "abc", "", "1,2,3", ","])
def test_parse_czech_decimal_rejects_invalid(value: str) -> None:
    with pytest.raises(ParseError):
        parse_czech_decimal(value)


def test_get_logger_returns_named_logger() -> None:
    logger = get_logger("cnb_rates.test")

    assert isinstance(logger, logging.Logger)
    assert logger.name == "cnb_rates.test"

"""Date helpers for the CNB daily feed."""

from __future__ import annotations

import re
from datetime import date, datetime

from cnb_rates.errors import ParseError

# CNB publishes ``17.10.2026``; the Czech locale also allows ``17. 10. 2026``.
_CNB_DATE_PATTERN = re.compile(r"^\s*(\d{1,2})\.\s*(\d{1,2})\.\s*(\d{4})\s*$")


def truncate_to_day(value: date | datetime) -> date:
    """Drop any time-of-day component from ``value``."""

    if isinstance(value, datetime):
        return value.date()
    return value


def format_query_date(day: date | datetime) -> str:
    """Render ``day`` as the ``DD.MM.YYYY`` value the feed expects."""

    return truncate_to_day(day).strftime("%d.%m.%Y")


def parse_cnb_date(value: str) -> date:
    """Parse a ``day.month.year`` string published by the CNB."""

    match = _CNB_DATE_PATTERN.match(value or "")
    if not match:
        raise ParseError(f"Invalid CNB date: {value!r}")
    day, month, year = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise ParseError(f"Invalid CNB date: {value!r}") from exc


__all__ = ["truncate_to_day", "format_query_date", "parse_cnb_date"]

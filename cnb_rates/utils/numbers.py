"""Czech locale number parsing."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from cnb_rates.errors import ParseError

_GROUP_SEPARATORS = re.compile(r"[ \u00a0\u202f]")
_DECIMAL_PATTERN = re.compile(r"^[+-]?\d+(?:,\d+)?$")


def parse_czech_decimal(value: str) -> Decimal:
    """Parse ``value`` written with a comma decimal separator.

    Spaces (including the non-breaking variants Czech formatting uses as a
    thousands separator) are ignored. A dot is not accepted as the decimal
    separator so that ``1.234`` cannot silently change magnitude.
    """

    if value is None:
        raise ParseError("Missing numeric value")
    cleaned = _GROUP_SEPARATORS.sub("", value.strip())
    if not _DECIMAL_PATTERN.match(cleaned):
        raise ParseError(f"Invalid Czech decimal: {value!r}")
    try:
        return Decimal(cleaned.replace(",", "."))
    except InvalidOperation as exc:  # pragma: no cover - guarded by the pattern
        raise ParseError(f"Invalid Czech decimal: {value!r}") from exc


__all__ = ["parse_czech_decimal"]

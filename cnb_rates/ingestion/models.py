"""Typed representation of the CNB daily rates document."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cnb_rates.errors import DataError
from cnb_rates.utils.dates import parse_cnb_date
from cnb_rates.utils.numbers import parse_czech_decimal


@dataclass(frozen=True, slots=True)
class Row:
    """One ``radek`` element: a single currency quote."""

    code: str
    volume: int
    rate_raw: str
    name: str | None = None
    country: str | None = None

    @property
    def rate(self) -> Decimal:
        """Quoted rate for ``volume`` units, parsed from the Czech locale text."""

        return parse_czech_decimal(self.rate_raw)

    @property
    def per_unit_rate(self) -> Decimal:
        """Rate for exactly one unit of the quoted currency."""

        if self.volume < 1:
            raise DataError(f"Row {self.code!r} has invalid unit volume {self.volume}")
        return self.rate / self.volume


@dataclass(frozen=True, slots=True)
class Table:
    type: str
    rows: tuple[Row, ...]


@dataclass(frozen=True, slots=True)
class NormalisedRow:
    code: str
    volume: int
    rate: Decimal
    per_unit_rate: Decimal


@dataclass(frozen=True, slots=True)
class NormalisedDocument:
    """A document whose locale formatted fields have all been converted."""

    bank: str
    rate_date: date
    order: int
    table_type: str
    rows: tuple[NormalisedRow, ...]


@dataclass(frozen=True, slots=True)
class BankRatesDocument:
    """The ``kurzy`` root element as published for one trading day.

    ``date`` and the row rates are kept as raw text and only converted when
    accessed, or all at once through :meth:`normalise`.
    """

    bank: str
    date_raw: str
    order: int
    table: Table

    @property
    def date(self) -> date:
        return parse_cnb_date(self.date_raw)

    @property
    def rows(self) -> tuple[Row, ...]:
        return self.table.rows

    def normalise(self) -> NormalisedDocument:
        """Convert every derived field, raising the first failure encountered."""

        rows = tuple(
            NormalisedRow(
                code=row.code,
                volume=row.volume,
                rate=row.rate,
                per_unit_rate=row.per_unit_rate,
            )
            for row in self.table.rows
        )
        return NormalisedDocument(
            bank=self.bank,
            rate_date=self.date,
            order=self.order,
            table_type=self.table.type,
            rows=rows,
        )


__all__ = ["BankRatesDocument", "NormalisedDocument", "NormalisedRow", "Row", "Table"]

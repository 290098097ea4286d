from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from cnb_rates.errors import DataError, ParseError
from cnb_rates.ingestion.models import BankRatesDocument, Row, Table


def _document(*rows: Row, date_raw: str = "17.10.2026") -> BankRatesDocument:
    return BankRatesDocument(bank="CNB", date_raw=date_raw, order=7, table=Table(type="T", rows=rows))


def test_row_per_unit_rate_divides_by_volume() -> None:
    row = Row(code="HUF", volume=100, rate_raw="24,500")

    assert row.rate == Decimal("24.500")
    assert row.per_unit_rate == Decimal("0.245")


def test_row_zero_volume_raises_data_error() -> None:
    row = Row(code="USD", volume=0, rate_raw="22,000")

    with pytest.raises(DataError):
        row.per_unit_rate


def test_document_date_uses_day_month_year() -> None:
    assert _document(date_raw="3.1.2026").date == date(2026, 1, 3)
    assert _document(date_raw="03. 01. 2026").date == date(2026, 1, 3)


def test_normalise_converts_every_field() -> None:
    document = _document(
        Row(code="EUR", volume=1, rate_raw="24,310"),
        Row(code="JPY", volume=100, rate_raw="15,640"),
    )

    normalised = document.normalise()

    assert normalised.rate_date == date(2026, 10, 17)
    assert normalised.order == 7
    assert normalised.table_type == "T"
    assert [(row.code, row.per_unit_rate) for row in normalised.rows] == [
        ("EUR", Decimal("24.310")),
        ("JPY", Decimal("0.1564")),
    ]


def test_normalise_raises_first_failure() -> None:
    with pytest.raises(DataError):
        _document(Row(code="EUR", volume=0, rate_raw="24,310")).normalise()
    with pytest.raises(ParseError):
        _document(Row(code="EUR", volume=1, rate_raw="24.310")).normalise()
    with pytest.raises(ParseError):
        _document(Row(code="EUR", volume=1, rate_raw="24,310"), date_raw="2026-10-17").normalise()


def test_documents_are_immutable() -> None:
    document = _document(Row(code="EUR", volume=1, rate_raw="24,310"))

    with pytest.raises(AttributeError):
        document.order = 8  # type: ignore[misc]

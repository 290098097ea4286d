"""Decode the CNB ``kurzy`` XML document into :class:`BankRatesDocument`."""

from __future__ import annotations

import io
from typing import BinaryIO
from xml.etree import ElementTree as ET

from cnb_rates.errors import ParseError
from cnb_rates.ingestion.models import BankRatesDocument, Row, Table
from cnb_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CNBXMLParser:
    """Structural decoder for the CNB daily rates feed.

    Only the shape of the document is checked here: attribute presence and
    the integer ``poradi``/``mnozstvi`` fields. The date and the rates stay as
    raw text on the resulting model.
    """

    ROOT_TAG = "kurzy"
    TABLE_TAG = "tabulka"
    ROW_TAG = "radek"

    def parse(self, source: bytes | BinaryIO) -> BankRatesDocument:
        root = self._read_root(source)
        if root.tag != self.ROOT_TAG:
            raise ParseError(f"Expected <{self.ROOT_TAG}> root element, got <{root.tag}>")

        tables = root.findall(self.TABLE_TAG)
        if len(tables) != 1:
            raise ParseError(f"Expected exactly one <{self.TABLE_TAG}> element, found {len(tables)}")

        document = BankRatesDocument(
            bank=self._attribute(root, "banka"),
            date_raw=self._attribute(root, "datum"),
            order=self._integer(root, "poradi"),
            table=self._parse_table(tables[0]),
        )
        LOGGER.debug(
            "Parsed CNB document %s #%s with %s rows",
            document.date_raw,
            document.order,
            len(document.rows),
        )
        return document

    @staticmethod
    def _read_root(source: bytes | BinaryIO) -> ET.Element:
        stream = io.BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
        try:
            return ET.parse(stream).getroot()
        except ET.ParseError as exc:
            raise ParseError(f"Malformed CNB XML: {exc}") from exc

    def _parse_table(self, element: ET.Element) -> Table:
        rows = tuple(self._parse_row(row) for row in element.findall(self.ROW_TAG))
        if not rows:
            raise ParseError(f"<{self.TABLE_TAG}> contains no <{self.ROW_TAG}> elements")
        return Table(type=self._attribute(element, "typ"), rows=rows)

    def _parse_row(self, element: ET.Element) -> Row:
        volume = self._integer(element, "mnozstvi")
        if volume < 0:
            raise ParseError(f"Negative unit volume {volume} in <{element.tag}>")
        return Row(
            code=self._attribute(element, "kod"),
            volume=volume,
            rate_raw=self._attribute(element, "kurz"),
            name=element.get("mena"),
            country=element.get("zeme"),
        )

    @staticmethod
    def _attribute(element: ET.Element, name: str) -> str:
        value = element.get(name)
        if value is None:
            raise ParseError(f"<{element.tag}> is missing the {name!r} attribute")
        return value

    @classmethod
    def _integer(cls, element: ET.Element, name: str) -> int:
        raw = cls._attribute(element, name)
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise ParseError(f"<{element.tag}> attribute {name!r} is not an integer: {raw!r}") from exc


def parse_bank_rates(source: bytes | BinaryIO) -> BankRatesDocument:
    """Parse a CNB daily rates document."""

    return CNBXMLParser().parse(source)


__all__ = ["CNBXMLParser", "parse_bank_rates"]

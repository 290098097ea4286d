"""Exceptions raised while retrieving CNB exchange rates."""

from __future__ import annotations


class CNBRatesError(RuntimeError):
    """Base class for every failure surfaced by :mod:`cnb_rates`."""


class FetchError(CNBRatesError):
    """The daily rates document could not be downloaded."""

    def __init__(self, message: str, *, url: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ParseError(CNBRatesError):
    """The document, or one of its locale formatted fields, is malformed."""


class DataError(CNBRatesError):
    """A structurally valid row carries values that cannot be used."""


__all__ = ["CNBRatesError", "FetchError", "ParseError", "DataError"]

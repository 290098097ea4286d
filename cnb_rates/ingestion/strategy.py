"""Abstractions for pluggable feed sources."""

from __future__ import annotations

from datetime import date
from typing import BinaryIO, Protocol


class FeedSource(Protocol):
    """Contract for retrieving the raw daily rates document.

    Implementations return a readable byte stream for ``day`` or raise
    :class:`cnb_rates.errors.FetchError`.
    """

    def fetch(self, day: date) -> BinaryIO:
        ...  # pragma: no cover - protocol definition


__all__ = ["FeedSource"]

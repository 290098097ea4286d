"""Value types exchanged with callers of the provider."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True, eq=False)
class Currency:
    """An ISO-style currency code compared case-insensitively."""

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError("Currency code must be a non-empty string")
        object.__setattr__(self, "code", self.code.strip())

    @property
    def key(self) -> str:
        """Return the upper-cased code used for comparisons."""

        return self.code.upper()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """Price of one unit of ``target_currency`` expressed in ``source_currency``."""

    source_currency: Currency
    target_currency: Currency
    value: Decimal

    def __str__(self) -> str:
        return f"{self.source_currency}/{self.target_currency}={self.value}"


__all__ = ["Currency", "ExchangeRate"]

from __future__ import annotations

from decimal import Decimal

import pytest

from cnb_rates import Currency, ExchangeRate, FetchError
from cnb_rates import cli


class _DummyProvider:
    instances: list["_DummyProvider"] = []

    def __init__(self, config, error: Exception | None = None) -> None:
        self.config = config
        self.error = error
        self.requested: list[str] = []
        _DummyProvider.instances.append(self)

    def get_exchange_rates(self, currencies):
        if self.error is not None:
            raise self.error
        self.requested = list(currencies)
        return iter([ExchangeRate(Currency("CZK"), Currency("USD"), Decimal("22.105"))])

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        return None


def test_parse_args_defaults() -> None:
    args = cli.parse_args(["usd", "eur"])

    assert args.currencies == ["usd", "eur"]
    assert args.timeout == 30


def test_parse_args_requires_currency() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_main_prints_rates(monkeypatch, capsys) -> None:
    _DummyProvider.instances.clear()
    monkeypatch.setattr(cli, "ExchangeRateProvider", _DummyProvider)

    exit_code = cli.main(["usd", "--url", "https://example.test/feed.xml", "--timeout", "5"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "CZK/USD=22.105"
    provider = _DummyProvider.instances[-1]
    assert provider.requested == ["usd"]
    assert provider.config.base_url == "https://example.test/feed.xml"
    assert provider.config.timeout == 5


def test_main_returns_error_code_on_failure(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        cli, "ExchangeRateProvider", lambda config: _DummyProvider(config, error=FetchError("offline"))
    )

    assert cli.main(["usd"]) == 1
    assert capsys.readouterr().out == ""

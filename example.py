from cnb_rates import Currency, ExchangeRateProvider, __version__

print(__version__)  # 0.1.0

currencies = [
    Currency("USD"),
    Currency("EUR"),
    Currency("czk"),
    Currency("JPY"),
    Currency("KES"),
    Currency("RUB"),
    Currency("THB"),
    Currency("TRY"),
    Currency("XYZ"),
]

with ExchangeRateProvider() as provider:
    rates = list(provider.get_exchange_rates(currencies))
    print(f"Successfully retrieved {len(rates)} exchange rates:")
    for rate in rates:
        print(rate)
    # => CZK/EUR=24.31 ... only pairs the CNB publishes; CZK, KES and XYZ are skipped

    # The second call on the same day is served from the in-memory cache.
    print([str(rate) for rate in provider.get_exchange_rates(["usd"])])

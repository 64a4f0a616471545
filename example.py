from eurofxref import EuroFxRef, InvalidInputError

# Default Usage: cache the daily document under ./cache
fx = EuroFxRef("cache", create_cache_dir=True)

# Latest reference rate for a single currency
result = fx.query("USD")
print(result.last_update.date(), result.rate_value)
# => 2023-05-17 1.0852

# The base currency never touches the network
print(fx.query("EUR").rate_value)  # 1.0

# Second query on the same day is served from ./cache/eurofxref-daily.xml
print(fx.daily("jpy"))

# Every entry published today
rates = fx.reference_rates()
print(rates.publication_date, rates.currencies())

try:
    fx.query("XYZ")
except InvalidInputError as exc:
    print(exc)

fx.close()

"""ECB-specific constants shared across the package."""

from __future__ import annotations

BASE_CURRENCY = "EUR"
BASE_CURRENCY_MESSAGE = "all currencies quoted against the euro (base currency)"

ECB_DAILY_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"
DEFAULT_TIMEOUT = 60
PUBLICATION_DATE_FORMAT = "%Y-%m-%d"

# Currencies published in the daily reference feed, in feed order.
ECB_CURRENCIES: tuple[str, ...] = (
    "USD", "JPY", "BGN", "CZK", "DKK",
    "GBP", "HUF", "PLN", "RON", "SEK",
    "CHF", "ISK", "NOK", "TRY", "AUD",
    "BRL", "CAD", "CNY", "HKD", "IDR",
    "ILS", "INR", "KRW", "MXN", "MYR",
    "NZD", "PHP", "SGD", "THB", "ZAR",
)


def is_base_currency(code: str) -> bool:
    """Return True when ``code`` names the euro, ignoring case."""

    return code.upper() == BASE_CURRENCY


__all__ = [
    "BASE_CURRENCY",
    "BASE_CURRENCY_MESSAGE",
    "DEFAULT_TIMEOUT",
    "ECB_CURRENCIES",
    "ECB_DAILY_URL",
    "PUBLICATION_DATE_FORMAT",
    "is_base_currency",
]

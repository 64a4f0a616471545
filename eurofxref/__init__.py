"""Public interface for the eurofxref package."""

from __future__ import annotations

from datetime import datetime
from importlib import metadata as importlib_metadata
from pathlib import Path

from eurofxref.cache import DocumentCache
from eurofxref.config import EuroFxRefConfig
from eurofxref.errors import (
    BaseCurrencyError,
    CacheIOError,
    DataFailureError,
    DecodeFailureError,
    EuroFxRefError,
    InvalidInputError,
    NetworkFailureError,
)
from eurofxref.ingestion.ecb_xml import find_rate, parse_reference_document
from eurofxref.ingestion.models import QueryResult, RateEntry, ReferenceRates
from eurofxref.ingestion.strategy import HttpSession
from eurofxref.utils.ecb import (
    BASE_CURRENCY,
    BASE_CURRENCY_MESSAGE,
    DEFAULT_TIMEOUT,
    ECB_DAILY_URL,
    is_base_currency,
)
from eurofxref.utils.logger import enable_debug_logging, get_logger

__all__ = [
    "__version__",
    "BASE_CURRENCY",
    "BaseCurrencyError",
    "CacheIOError",
    "DataFailureError",
    "DecodeFailureError",
    "EuroFxRef",
    "EuroFxRefConfig",
    "EuroFxRefError",
    "InvalidInputError",
    "NetworkFailureError",
    "QueryResult",
    "RateEntry",
    "ReferenceRates",
    "new",
    "validate_currency_code",
]

try:
    __version__ = importlib_metadata.version("eurofxref")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


def validate_currency_code(code: str, currencies: frozenset[str]) -> None:
    """Raise :class:`InvalidInputError` unless ``code`` is a supported quote currency.

    The euro is refused with :class:`BaseCurrencyError` since every published
    rate is quoted against it.
    """

    if not code:
        raise InvalidInputError("no currency code specified")
    if len(code) != 3:
        raise InvalidInputError(f'the "{code}" currency code has a wrong number of characters')
    if code.upper() not in currencies:
        if is_base_currency(code):
            raise BaseCurrencyError(BASE_CURRENCY_MESSAGE)
        raise InvalidInputError(f'the currency code "{code}" is not part of the reference list')


class EuroFxRef:
    """Query facade over the ECB daily euro reference rates."""

    __slots__ = ("config", "document_cache")

    def __init__(
        self,
        cache_dir: str | Path | None = None,
        create_cache_dir: bool = False,
        debug: bool = False,
        *,
        url: str = ECB_DAILY_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: HttpSession | None = None,
    ) -> None:
        """Configure where the daily document is cached.

        An empty or ``None`` ``cache_dir`` disables caching, so every query
        downloads the document. With ``create_cache_dir`` a missing cache
        directory is created (one level only) on the first query. ``debug``
        logs the raw document on every query and lowers the package logger
        to DEBUG so cache decisions show up.
        """

        self.config = EuroFxRefConfig.build(
            cache_dir,
            create_cache_dir,
            debug,
            url=url,
            timeout=timeout,
        )
        if debug:
            enable_debug_logging()
        self.document_cache = DocumentCache(self.config, session=session)

    @property
    def currencies(self) -> frozenset[str]:
        return self.config.currencies

    def validate_currency_code(self, code: str) -> None:
        """Validate ``code`` against this instance's currency set."""

        validate_currency_code(code, self.config.currencies)

    def supports(self, code: str) -> bool:
        """Return True when ``code`` can be looked up in the feed."""

        try:
            self.validate_currency_code(code)
        except InvalidInputError:
            return False
        return True

    def query(self, code: str) -> QueryResult:
        """Return today's reference rate of ``code`` against the euro.

        ``EUR`` itself always yields ``1.0`` stamped with the current time,
        without touching the cache or the network.
        """

        try:
            self.validate_currency_code(code)
        except BaseCurrencyError:
            return QueryResult(last_update=datetime.now(), rate_value=1.00)

        content = self.document_cache.resolve()
        if self.config.debug:
            LOGGER.info("Reference document:\n%s", content.decode("utf-8", errors="replace"))
        rates = parse_reference_document(content)
        return find_rate(rates, code)

    daily = query

    def reference_rates(self) -> ReferenceRates:
        """Return every entry of today's document."""

        return parse_reference_document(self.document_cache.resolve())

    def close(self) -> None:
        self.document_cache.close()

    def __enter__(self) -> "EuroFxRef":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def new(cache_dir: str | Path | None, create_cache_dir: bool, debug: bool = False) -> EuroFxRef:
    """Create a :class:`EuroFxRef` with the default feed URL and timeout."""

    return EuroFxRef(cache_dir, create_cache_dir, debug)

"""Exception hierarchy raised by the eurofxref package."""

from __future__ import annotations


class EuroFxRefError(Exception):
    """Base class for every failure surfaced by eurofxref."""


class InvalidInputError(EuroFxRefError, ValueError):
    """Raised for empty, malformed or unsupported currency codes."""


class BaseCurrencyError(InvalidInputError):
    """Raised when the base currency itself is validated as a quote currency."""


class CacheIOError(EuroFxRefError, OSError):
    """Raised when the cache directory or cached document cannot be handled."""


class NetworkFailureError(EuroFxRefError):
    """Raised when the reference document cannot be downloaded."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeFailureError(EuroFxRefError):
    """Raised when the document does not have the expected XML structure."""


class DataFailureError(EuroFxRefError, ValueError):
    """Raised when a rate or publication date cannot be extracted."""


__all__ = [
    "BaseCurrencyError",
    "CacheIOError",
    "DataFailureError",
    "DecodeFailureError",
    "EuroFxRefError",
    "InvalidInputError",
    "NetworkFailureError",
]

"""Immutable configuration shared by the query facade and the document cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from eurofxref.utils.ecb import DEFAULT_TIMEOUT, ECB_CURRENCIES, ECB_DAILY_URL


def _normalise_cache_dir(cache_dir: str | Path | None) -> Path | None:
    # Path("") collapses to Path("."), so test the string form for emptiness.
    raw = str(cache_dir) if cache_dir is not None else ""
    return Path(raw) if raw else None


@dataclass(frozen=True, slots=True)
class EuroFxRefConfig:
    """Settings for one :class:`~eurofxref.EuroFxRef` instance.

    ``cache_dir`` of ``None`` disables the on-disk cache entirely; every query
    then downloads the reference document.
    """

    url: str = ECB_DAILY_URL
    timeout: float = DEFAULT_TIMEOUT
    cache_dir: Path | None = None
    create_cache_dir: bool = False
    debug: bool = False
    currencies: frozenset[str] = field(default_factory=lambda: frozenset(ECB_CURRENCIES))

    @classmethod
    def build(
        cls,
        cache_dir: str | Path | None,
        create_cache_dir: bool,
        debug: bool = False,
        *,
        url: str = ECB_DAILY_URL,
        timeout: float = DEFAULT_TIMEOUT,
        currencies: Iterable[str] = ECB_CURRENCIES,
    ) -> "EuroFxRefConfig":
        """Normalise loosely typed constructor arguments."""

        if timeout <= 0:
            raise ValueError("timeout must be positive")
        return cls(
            url=url,
            timeout=timeout,
            cache_dir=_normalise_cache_dir(cache_dir),
            create_cache_dir=create_cache_dir,
            debug=debug,
            currencies=frozenset(code.upper() for code in currencies),
        )

    @property
    def caching_enabled(self) -> bool:
        return self.cache_dir is not None


__all__ = ["EuroFxRefConfig"]

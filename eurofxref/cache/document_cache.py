"""Same-day disk cache in front of the ECB reference document download."""

from __future__ import annotations

import os
from datetime import date, datetime
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import requests

from eurofxref.config import EuroFxRefConfig
from eurofxref.errors import CacheIOError, NetworkFailureError
from eurofxref.ingestion.strategy import HttpSession
from eurofxref.utils.logger import get_logger

LOGGER = get_logger(__name__)
DEFAULT_DOCUMENT_NAME = "eurofxref-daily.xml"
USER_AGENT = "eurofxref-daily-client/1.0"


def cache_path_for_url(cache_dir: Path, url: str) -> Path:
    """Return the cache file for ``url``: its path basename under ``cache_dir``."""

    name = PurePosixPath(urlparse(url).path).name
    return cache_dir / (name or DEFAULT_DOCUMENT_NAME)


def is_stale(stat_result: os.stat_result, today: date | None = None) -> bool:
    """Return True when a cached file must not be reused.

    A file is stale once its local modification date is not ``today`` or when
    it is empty. Freshness follows calendar days, not a rolling window, since
    the feed is republished once per business day.
    """

    today = today or date.today()
    modified_on = datetime.fromtimestamp(stat_result.st_mtime).date()
    return modified_on != today or stat_result.st_size == 0


class DocumentCache:
    """Resolve the reference document from disk or the network.

    Each :meth:`resolve` call performs at most one directory creation, one
    file deletion and one file write. Nothing is retried and no file locks
    are taken; concurrent writers may at worst cause a redundant download.
    """

    def __init__(self, config: EuroFxRefConfig, *, session: HttpSession | None = None) -> None:
        self.config = config
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers.setdefault("User-Agent", USER_AGENT)
        self.session: HttpSession = session
        self.path: Path | None = (
            cache_path_for_url(config.cache_dir, config.url)
            if config.caching_enabled
            else None
        )

    def resolve(self) -> bytes:
        """Return today's document bytes, preferring a fresh cached copy."""

        if self._has_fresh_copy():
            return self._read_cached()
        content = self.fetch()
        if self.path is not None:
            self._write_cached(content)
        return content

    def _has_fresh_copy(self) -> bool:
        if self.path is None:
            return False

        cache_dir = self.path.parent
        if not cache_dir.exists():
            if self.config.create_cache_dir:
                try:
                    cache_dir.mkdir()
                except OSError as exc:
                    raise CacheIOError(f"error creating cache directory {cache_dir}: {exc}") from exc
                LOGGER.debug("Created cache directory %s", cache_dir)
            return False

        try:
            stat_result = self.path.stat()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise CacheIOError(f"error inspecting cached file {self.path}: {exc}") from exc

        if is_stale(stat_result):
            LOGGER.debug("Discarding stale cached document %s", self.path)
            try:
                self.path.unlink()
            except OSError as exc:
                raise CacheIOError(f"error removing cached xml file {self.path}: {exc}") from exc
            return False
        return True

    def _read_cached(self) -> bytes:
        assert self.path is not None
        try:
            content = self.path.read_bytes()
        except OSError as exc:
            raise CacheIOError(f"error reading the cached xml file {self.path}: {exc}") from exc
        LOGGER.debug("Using cached document %s (%d bytes)", self.path, len(content))
        return content

    def _write_cached(self, content: bytes) -> None:
        assert self.path is not None
        try:
            self.path.write_bytes(content)
        except OSError as exc:
            raise CacheIOError(f"error writing the cached xml file {self.path}: {exc}") from exc
        LOGGER.debug("Cached %d bytes to %s", len(content), self.path)

    def fetch(self) -> bytes:
        """Download the document, bypassing the cache."""

        url = self.config.url
        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as exc:
            raise NetworkFailureError(f"error making http request to {url}: {exc}") from exc

        status = response.status_code
        if not 200 <= status < 300:
            raise NetworkFailureError(
                f'the request get "{url}" returned an error with status code {status}',
                status_code=status,
            )
        LOGGER.info("Fetched reference document from %s", url)
        return response.content

    def close(self) -> None:
        """Close the HTTP session when this cache created it."""

        if self._owns_session:
            self.session.close()  # type: ignore[attr-defined]


__all__ = ["DEFAULT_DOCUMENT_NAME", "DocumentCache", "cache_path_for_url", "is_stale"]

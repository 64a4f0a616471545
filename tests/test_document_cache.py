from __future__ import annotations

import os
from datetime import date, datetime, time, timedelta
from pathlib import Path

import pytest
import requests

from eurofxref.cache import DocumentCache, cache_path_for_url, is_stale
from eurofxref.cache.document_cache import USER_AGENT
from eurofxref.config import EuroFxRefConfig
from eurofxref.errors import CacheIOError, NetworkFailureError


def _age_file(path: Path, days: int) -> None:
    past = datetime.combine(date.today() - timedelta(days=days), time(12)).timestamp()
    os.utime(path, (past, past))


def _cache(cache_dir: Path | None, session, *, create: bool = False) -> DocumentCache:
    config = EuroFxRefConfig.build(cache_dir, create)
    return DocumentCache(config, session=session)


def test_cache_path_uses_url_basename(tmp_path: Path) -> None:
    path = cache_path_for_url(
        tmp_path, "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml?ts=1"
    )

    assert path == tmp_path / "eurofxref-daily.xml"
    assert cache_path_for_url(tmp_path, "https://example.test/") == tmp_path / "eurofxref-daily.xml"


def test_is_stale_checks_calendar_day_and_size(tmp_path: Path) -> None:
    document = tmp_path / "eurofxref-daily.xml"
    document.write_bytes(b"<Envelope/>")

    assert is_stale(document.stat()) is False
    assert is_stale(document.stat(), today=date.today() + timedelta(days=1)) is True

    document.write_bytes(b"")
    assert is_stale(document.stat()) is True


def test_resolve_without_cache_dir_always_downloads(session, tmp_path: Path) -> None:
    cache = _cache(None, session)

    assert cache.path is None
    assert cache.resolve() == session.content
    assert cache.resolve() == session.content
    assert len(session.calls) == 2
    assert list(tmp_path.iterdir()) == []


def test_resolve_missing_dir_without_create_flag_fetches_only(session, tmp_path: Path) -> None:
    cache_dir = tmp_path / "cache"
    cache = _cache(cache_dir, session)

    with pytest.raises(CacheIOError, match="error writing"):
        cache.resolve()

    assert len(session.calls) == 1
    assert not cache_dir.exists()


def test_resolve_creates_missing_dir_and_persists(session, tmp_path: Path) -> None:
    cache_dir = tmp_path / "cache"
    cache = _cache(cache_dir, session, create=True)

    content = cache.resolve()

    assert content == session.content
    assert (cache_dir / "eurofxref-daily.xml").read_bytes() == session.content
    assert session.calls == [{"url": cache.config.url, "timeout": cache.config.timeout}]


def test_resolve_does_not_create_nested_dirs(session, tmp_path: Path) -> None:
    cache = _cache(tmp_path / "missing" / "cache", session, create=True)

    with pytest.raises(CacheIOError, match="error creating cache directory"):
        cache.resolve()
    assert session.calls == []


def test_resolve_prefers_fresh_cached_copy(session, tmp_path: Path) -> None:
    cached = tmp_path / "eurofxref-daily.xml"
    cached.write_bytes(b"<cached/>")
    cache = _cache(tmp_path, session)

    assert cache.resolve() == b"<cached/>"
    assert session.calls == []


@pytest.mark.parametrize("stale_content, age_days", [(b"<old/>", 1), (b"", 0)])
def test_resolve_replaces_stale_copy(
    session, tmp_path: Path, stale_content: bytes, age_days: int
) -> None:
    cached = tmp_path / "eurofxref-daily.xml"
    cached.write_bytes(stale_content)
    _age_file(cached, age_days)
    cache = _cache(tmp_path, session)

    assert cache.resolve() == session.content
    assert len(session.calls) == 1
    assert cached.read_bytes() == session.content
    assert is_stale(cached.stat()) is False


def test_resolve_reports_delete_failure(monkeypatch, session, tmp_path: Path) -> None:
    cached = tmp_path / "eurofxref-daily.xml"
    cached.write_bytes(b"<old/>")
    _age_file(cached, 2)

    def _refuse(self, missing_ok: bool = False) -> None:
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "unlink", _refuse)

    with pytest.raises(CacheIOError, match="error removing"):
        _cache(tmp_path, session).resolve()
    assert session.calls == []


def test_resolve_reports_read_failure_without_network_fallback(
    monkeypatch, session, tmp_path: Path
) -> None:
    (tmp_path / "eurofxref-daily.xml").write_bytes(b"<cached/>")

    def _broken(self) -> bytes:
        raise OSError("disk error")

    monkeypatch.setattr(Path, "read_bytes", _broken)

    with pytest.raises(CacheIOError, match="error reading"):
        _cache(tmp_path, session).resolve()
    assert session.calls == []


@pytest.mark.parametrize("status", [404, 500, 503])
def test_fetch_rejects_non_success_status(session, tmp_path: Path, status: int) -> None:
    session.status_code = status
    cache = _cache(tmp_path, session)

    with pytest.raises(NetworkFailureError) as excinfo:
        cache.resolve()

    assert excinfo.value.status_code == status
    assert not (tmp_path / "eurofxref-daily.xml").exists()


def test_fetch_wraps_transport_errors(session) -> None:
    session.error = requests.Timeout("timed out")

    with pytest.raises(NetworkFailureError, match="timed out") as excinfo:
        _cache(None, session).fetch()

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, requests.Timeout)


def test_default_session_carries_user_agent() -> None:
    cache = DocumentCache(EuroFxRefConfig())
    try:
        assert isinstance(cache.session, requests.Session)
        assert cache.session.headers["User-Agent"] == USER_AGENT
    finally:
        cache.close()


def test_close_leaves_injected_session_open(session) -> None:
    cache = _cache(None, session)
    cache.close()

    assert session.closed is False


def test_resolve_logs_cache_write(session, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="eurofxref"):
        _cache(tmp_path, session).resolve()

    assert f"Cached {len(session.content)} bytes to {tmp_path / 'eurofxref-daily.xml'}" in caplog.text
    assert caplog.text.isascii()

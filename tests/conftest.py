"""Shared fixtures: a canned ECB document and an in-memory HTTP session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

DAILY_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
    <gesmes:subject>Reference rates</gesmes:subject>
    <gesmes:Sender>
        <gesmes:name>European Central Bank</gesmes:name>
    </gesmes:Sender>
    <Cube>
        <Cube time='2023-05-17'>
            <Cube currency='USD' rate='1.0852'/>
            <Cube currency='JPY' rate='148.21'/>
            <Cube currency='GBP' rate='0.86945'/>
            <Cube currency='CHF' rate='0.9737'/>
        </Cube>
    </Cube>
</gesmes:Envelope>
"""


@dataclass
class DummyResponse:
    content: bytes
    status_code: int = 200


@dataclass
class DummySession:
    """Stands in for ``requests.Session`` and records every GET."""

    content: bytes = DAILY_XML
    status_code: int = 200
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    def get(self, url: str, *, timeout: float, **kwargs: Any) -> DummyResponse:
        self.calls.append({"url": url, "timeout": timeout, **kwargs})
        if self.error is not None:
            raise self.error
        return DummyResponse(content=self.content, status_code=self.status_code)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def daily_xml() -> bytes:
    return DAILY_XML


@pytest.fixture
def session() -> DummySession:
    return DummySession()

"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class RateEntry:
    """A single currency/rate pair as published in the daily feed."""

    currency: str
    rate: str


@dataclass(frozen=True, slots=True)
class ReferenceRates:
    """Typed view of a parsed reference document."""

    publication_date: str
    entries: tuple[RateEntry, ...] = field(default_factory=tuple)
    subject: str | None = None
    sender: str | None = None

    def currencies(self) -> list[str]:
        return [entry.currency.upper() for entry in self.entries]


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Rate returned for a single currency query."""

    last_update: datetime
    rate_value: float

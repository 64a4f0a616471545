"""Abstractions for pluggable HTTP transports."""

from __future__ import annotations

from typing import Any, Protocol


class HttpResponse(Protocol):
    status_code: int
    content: bytes


class HttpSession(Protocol):
    """Contract for the HTTP session used to download the reference document.

    ``requests.Session`` satisfies it; tests substitute lightweight doubles.
    """

    def get(self, url: str, *, timeout: float, **kwargs: Any) -> HttpResponse:
        ...  # pragma: no cover - protocol definition


__all__ = ["HttpResponse", "HttpSession"]

from __future__ import annotations


class TransitApiError(Exception):
    """Base exception for failed calls to the upstream transit API."""


class NetworkError(TransitApiError):
    """Raised when a request fails in transport or returns a non-2xx status."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(TransitApiError):
    """Raised when a response body is not the expected JSON:API document."""

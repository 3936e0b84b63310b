"""Application error taxonomy.

``AppError`` subclasses are rendered by the FastAPI handlers in
``seo_checker.main`` as ``{"error": message}`` with their status code.
The remaining errors never reach the client directly: they are recovered
inside the GEO pipeline or converted to ``AnalysisFailedError`` at the API
boundary.
"""

from __future__ import annotations

GENERIC_ANALYSIS_ERROR = "Failed to analyze URL. Make sure it is accessible and valid."
URL_REQUIRED = "URL is required"


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(AppError):
    """Request is missing required input."""

    status_code = 400


class AnalysisFailedError(AppError):
    """Opaque failure returned to the client for any fetch or analysis error."""

    status_code = 500

    def __init__(self, message: str = GENERIC_ANALYSIS_ERROR) -> None:
        super().__init__(message)


class FetchError(Exception):
    """Network-level failure while retrieving the target page.

    ``kind`` is one of: invalid_url, timeout, dns, connect, tls, http.
    It is used for logs and metrics only.
    """

    def __init__(self, url: str, kind: str, detail: str = "") -> None:
        super().__init__(f"{kind} error fetching {url}: {detail}" if detail else f"{kind} error fetching {url}")
        self.url = url
        self.kind = kind
        self.detail = detail


class StructuredDataError(ValueError):
    """A JSON-LD block could not be decoded."""


class ReadabilityError(ValueError):
    """Readability formulas cannot be computed for the given text."""

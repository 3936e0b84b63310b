"""Page fetcher: one GET per analysis, body returned regardless of status.

Uses an ``httpx.AsyncClient`` supplied by the caller so connection
settings (user-agent, timeout, transport) live in one place.
Failures are raised as ``FetchError`` with a ``kind`` that only feeds logs
and metrics; callers show the client a single generic message.
"""

from __future__ import annotations

import logging
import time
from urllib.parse import urlparse

import httpx

from seo_checker.analysis.types import FetchedDocument
from seo_checker.core.config import settings
from seo_checker.core.exceptions import FetchError
from seo_checker.core.metrics import FETCH_DURATION

logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = {"http", "https"}

_DNS_MARKERS = ("name or service not known", "nodename nor servname", "getaddrinfo", "name resolution")
_TLS_MARKERS = ("ssl", "certificate", "tls")


def build_client(**kwargs) -> httpx.AsyncClient:
    """AsyncClient configured from settings (user-agent, bounded timeout, redirects)."""
    return httpx.AsyncClient(
        headers={"User-Agent": settings.fetch_user_agent},
        timeout=settings.fetch_timeout,
        follow_redirects=True,
        **kwargs,
    )


def validate_url(url: str) -> str:
    """Require an absolute http(s) URL with a host. No scheme is prepended."""
    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
    except ValueError as exc:
        raise FetchError(url, "invalid_url", str(exc)) from exc
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not parsed.netloc:
        raise FetchError(url, "invalid_url", "expected an absolute http(s) URL")
    return candidate


def classify_error(exc: httpx.HTTPError) -> str:
    """Map an httpx exception to a coarse failure kind for logs and metrics."""
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.UnsupportedProtocol):
        return "invalid_url"
    if isinstance(exc, httpx.ConnectError):
        message = str(exc).lower()
        if any(marker in message for marker in _DNS_MARKERS):
            return "dns"
        if any(marker in message for marker in _TLS_MARKERS):
            return "tls"
        return "connect"
    return "http"


async def fetch_document(client: httpx.AsyncClient, url: str) -> FetchedDocument:
    """GET the page and return its body text. Non-2xx responses are returned too."""
    try:
        target = validate_url(url)
    except FetchError:
        FETCH_DURATION.labels(result="invalid_url").observe(0)
        raise

    start = time.perf_counter()
    try:
        resp = await client.get(target, headers={"User-Agent": settings.fetch_user_agent})
    except httpx.InvalidURL as exc:
        FETCH_DURATION.labels(result="invalid_url").observe(time.perf_counter() - start)
        raise FetchError(url, "invalid_url", str(exc)) from exc
    except httpx.HTTPError as exc:
        kind = classify_error(exc)
        FETCH_DURATION.labels(result=kind).observe(time.perf_counter() - start)
        logger.warning("Fetch failed (%s) for %s: %s", kind, url, exc, extra={"target_url": url})
        raise FetchError(url, kind, str(exc)) from exc

    FETCH_DURATION.labels(result="ok").observe(time.perf_counter() - start)

    if resp.status_code >= 400:
        logger.warning(
            "Fetched %s with HTTP %d; analyzing the error page as-is", url, resp.status_code, extra={"target_url": url}
        )
    else:
        logger.debug(
            "Fetched %s: HTTP %d, %d bytes", url, resp.status_code, len(resp.content), extra={"target_url": url}
        )

    return FetchedDocument(url=target, html=resp.text, status_code=resp.status_code)

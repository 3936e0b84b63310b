"""Prometheus metrics for the application."""

import time

from prometheus_client import Counter, Histogram, Info, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from seo_checker import __version__

# --- Metrics ---

APP_INFO = Info("app", "SEO checker application info")
APP_INFO.info({"version": __version__, "name": "seo_checker"})

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30],
)

ANALYSIS_RUNS = Counter(
    "analysis_runs_total",
    "Total page analyses by outcome",
    ["outcome"],  # success | input_error | fetch_error | error
)

FETCH_DURATION = Histogram(
    "page_fetch_duration_seconds",
    "Target page fetch duration in seconds",
    ["result"],  # ok | invalid_url | timeout | dns | connect | tls | http
    buckets=[0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30],
)


# --- Middleware ---


def _route_path(request: Request) -> str:
    """Use the matched route template as the label to keep cardinality bounded."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collect HTTP request metrics for Prometheus."""

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path == "/metrics":
            return await call_next(request)

        method = request.method

        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        path = _route_path(request)

        REQUEST_COUNT.labels(method=method, path=path, status=response.status_code).inc()
        REQUEST_DURATION.labels(method=method, path=path).observe(duration)

        return response


def metrics_response() -> Response:
    """Generate Prometheus /metrics response."""
    return Response(
        content=generate_latest(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )

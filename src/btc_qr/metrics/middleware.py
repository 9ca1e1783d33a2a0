"""Prometheus HTTP request metrics middleware for FastAPI.

Tracks:
- ``btcqr_http_requests_total`` (counter) — requests by method, route, status
- ``btcqr_http_request_duration_seconds`` (histogram) — duration by method, route

Routes are labelled by their template (``/api/v1/transaction/qr``), never by
query strings, so autocomplete prefixes typed by users stay out of the registry.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from prometheus_client import CollectorRegistry
    from starlette.requests import Request
    from starlette.responses import Response

_SKIP_PATHS = frozenset({"/metrics", "/health"})
_UNMATCHED = "<unmatched>"


def _route_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", _UNMATCHED)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that records request count and duration."""

    def __init__(self, app: object, *, registry: CollectorRegistry) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._request_count = Counter(
            "btcqr_http_requests",
            "Total HTTP requests",
            ("method", "route", "status_code"),
            registry=registry,
        )
        self._request_duration = Histogram(
            "btcqr_http_request_duration_seconds",
            "HTTP request duration in seconds",
            ("method", "route"),
            registry=registry,
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:  # type: ignore[type-arg]
        """Time and count every request except the probe endpoints."""
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start = time.monotonic()
        response: Response = await call_next(request)
        elapsed = time.monotonic() - start

        route = _route_label(request)
        self._request_count.labels(
            method=request.method, route=route, status_code=str(response.status_code)
        ).inc()
        self._request_duration.labels(method=request.method, route=route).observe(elapsed)
        return response

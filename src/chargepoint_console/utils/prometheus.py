"""Prometheus metrics of the console gateway."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import Gauge

from chargepoint_console.resources.registry import RESOURCES

__all__ = ["REQUESTS_IN_PROGRESS", "add_prometheus_metrics", "route_area"]


REQUESTS_IN_PROGRESS = Gauge(
    "console_requests_in_progress_total",
    "Console gateway requests being served",
    ["method", "area"],
)

_TOP_LEVEL_AREAS = frozenset(
    {"docs", "health", "info", "me", "metrics", "openapi.json"}
)
_METHODS = frozenset({"DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT"})
_OTHER_AREA = "other"


def route_area(path: str) -> str:
    """Collapse a request path to its area, e.g. ``resources/users``.

    Element IDs are dropped and paths outside the gateway's routes share the
    ``other`` area, so the label set is fixed.
    """
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return "root"

    head = segments[0]
    if head == "resources":
        if len(segments) > 1 and segments[1] in RESOURCES:
            return f"resources/{segments[1]}"
        return _OTHER_AREA
    return head if head in _TOP_LEVEL_AREAS else _OTHER_AREA


def add_prometheus_metrics(app: FastAPI) -> None:
    """Track in-flight gateway requests per method and area."""

    @app.middleware("http")
    async def track_in_flight(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        method = request.method if request.method in _METHODS else "OTHER"
        gauge = REQUESTS_IN_PROGRESS.labels(method, route_area(request.url.path))
        gauge.inc()
        try:
            return await call_next(request)
        finally:
            gauge.dec()

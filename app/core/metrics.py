"""Prometheus metrics for HTTP traffic and member listing queries."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from time import perf_counter

from fastapi import Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

HTTP_REQUESTS_TOTAL = Counter(
    "datingapp_http_requests_total",
    "Total number of HTTP requests handled by the API.",
    ["method", "path", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "datingapp_http_request_duration_seconds",
    "HTTP request latency in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

MEMBER_LIST_QUERIES_TOTAL = Counter(
    "datingapp_member_list_queries_total",
    "Member listing queries by sort order and age filter usage.",
    ["order_by", "age_filter"],
)

MEMBER_LIST_MATCHES = Histogram(
    "datingapp_member_list_matches",
    "Members matching listing filters before paging.",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500, 1000, 5000),
)


def _request_path_label(request: Request) -> str:
    route = request.scope.get("route")
    route_path = getattr(route, "path", None)
    if route_path:
        return str(route_path)
    return request.url.path


async def instrument_http_request(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Track request count and latency for each endpoint."""
    started_at = perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        path_label = _request_path_label(request)
        method_label = request.method.upper()

        HTTP_REQUESTS_TOTAL.labels(
            method=method_label,
            path=path_label,
            status_code=str(status_code),
        ).inc()
        HTTP_REQUEST_DURATION_SECONDS.labels(
            method=method_label,
            path=path_label,
        ).observe(perf_counter() - started_at)


def record_member_query(order_by: str, age_filter_active: bool, total_items: int) -> None:
    """Count one listing query and the size of its filtered set."""
    MEMBER_LIST_QUERIES_TOTAL.labels(
        order_by=order_by,
        age_filter="on" if age_filter_active else "off",
    ).inc()
    MEMBER_LIST_MATCHES.observe(total_items)


def build_metrics_response() -> Response:
    """Return metrics payload in Prometheus text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

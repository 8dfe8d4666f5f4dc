"""Prometheus Metrics — process-wide collectors for HTTP traffic and ingestion.

Invariants:
    - Collectors registered once, at import, on the default registry
    - path label is the matched route template (bounded cardinality); "unmatched" otherwise

Design Decisions:
    - prometheus_client default registry: /metrics exposes it with generate_latest()
"""

from prometheus_client import Counter, Histogram

HTTP_REQUESTS = Counter(
    "http_requests_total",
    "Total HTTP requests by method, route and status",
    ["method", "path", "status"],
)
HTTP_REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["method", "path"],
)
READINGS_INGESTED = Counter(
    "readings_ingested_total",
    "Temperature readings persisted",
)


def observe_request(method: str, path: str, status: int, duration: float) -> None:
    HTTP_REQUESTS.labels(method=method, path=path, status=str(status)).inc()
    HTTP_REQUEST_DURATION.labels(method=method, path=path).observe(duration)

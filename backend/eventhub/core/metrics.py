"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Write-path metrics
record_writes = Counter(
    'record_writes_total',
    'Total record write attempts',
    ['kind', 'status']  # kind: event/booking, status: success, rejected
)

validation_failures = Counter(
    'validation_failures_total',
    'Writes rejected by validation, by error code',
    ['code']
)

record_write_latency = Histogram(
    'record_write_latency_seconds',
    'Latency of validated record writes',
    ['kind'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_write(kind: str, status: str):
    """Record a write attempt. Status: success, rejected"""
    record_writes.labels(kind=kind, status=status).inc()


def record_validation_failure(code: str):
    """Record a rejected write by its domain error code."""
    validation_failures.labels(code=code).inc()

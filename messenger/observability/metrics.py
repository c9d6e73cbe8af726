"""
Prometheus Metrics for the messenger backend.

DATA FLOW:
    This file                  presentation/api/metrics.py
    ─────────                  ───────────────────────────
    Define metrics ──────────► /metrics endpoint ──────────► Prometheus scraper

METRIC TYPES:
    - Counter: Value only goes up (id collisions, storage failures)
    - Histogram: Distribution (request latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],  # in seconds
)

ID_COLLISIONS_TOTAL = Counter(
    "messenger_id_collisions_total",
    "Generated ids that already existed in their scope and were regenerated",
    ["entity"],
)

STORAGE_FAILURES_TOTAL = Counter(
    "messenger_storage_failures_total",
    "Document store operations that failed",
    ["operation"],
)


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.py metrics middleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_id_collision(entity: str):
    """Call on every regenerated id. Integration point: application/services/id_generator.py"""
    ID_COLLISIONS_TOTAL.labels(entity=entity).inc()


def increment_storage_failure(operation: str):
    """
    Call to record a failed store operation.

    Integration points:
        - infrastructure/persistence/*_document_store.py: driver errors, writes that modify nothing
        - application/services/id_generator.py: retry policy gave up
    """
    STORAGE_FAILURES_TOTAL.labels(operation=operation).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


# =============================================================================
# EXPORTS
# =============================================================================
__all__ = [
    "observe_request_latency",
    "increment_id_collision",
    "increment_storage_failure",
    "get_metrics_content",
]

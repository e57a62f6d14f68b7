"""Prometheus metrics for the Tarayath advisor service.

Business Metrics:
- tarayath_evaluation_total: Evaluations by verdict
- tarayath_verdict_score: Distribution of verdict scores
- tarayath_purchase_marked_total: Purchases marked as bought, by verdict

Technical Metrics:
- tarayath_evaluation_latency_seconds: Evaluation request latency
- tarayath_http_requests_total: HTTP requests by endpoint/status
- tarayath_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

evaluation_total = Counter(
    "tarayath_evaluation_total",
    "Total number of purchase evaluations",
    ["verdict"],  # yes, wait, no
)

verdict_score_histogram = Histogram(
    "tarayath_verdict_score",
    "Verdict scores produced by the decision engine",
    buckets=[-5, -3, -1, 0, 1, 2, 3, 4, 5, 6],
)

purchase_marked_total = Counter(
    "tarayath_purchase_marked_total",
    "Purchases marked as bought, labelled by the verdict they received",
    ["verdict"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

evaluation_latency = Histogram(
    "tarayath_evaluation_latency_seconds",
    "Evaluation request latency in seconds",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

http_requests_total = Counter(
    "tarayath_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "tarayath_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_evaluation(verdict: str, verdict_score: int) -> None:
    """Record an evaluation in metrics."""
    evaluation_total.labels(verdict=verdict).inc()
    verdict_score_histogram.observe(verdict_score)


def record_purchase_marked(verdict: str) -> None:
    """Record a purchase being marked as bought."""
    purchase_marked_total.labels(verdict=verdict).inc()


@contextmanager
def track_evaluation_latency() -> Generator[None, None, None]:
    """Context manager to track evaluation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        evaluation_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST

"""Prometheus metrics for the cooperative lending service.

Metrics are organized into two categories:

Business Metrics (for the cooperative's finance team):
- coop_eligibility_checks_total: Eligibility checks by outcome and reason
- coop_loan_quotes_total: Loan quotes by tier and outcome
- coop_penalties_assessed_total: Penalty calculations that found a penalty
- coop_penalty_amount: Distribution of assessed penalties
- coop_repayments_total: Repayments by resulting installment status

Technical Metrics (for Engineering):
- coop_calculation_latency_seconds: Calculator latency by operation
- coop_http_requests_total: HTTP requests by endpoint/status
- coop_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator, Optional

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

eligibility_checks_total = Counter(
    "coop_eligibility_checks_total",
    "Total number of loan eligibility checks",
    ["outcome", "reason"],  # eligible/ineligible, reason code or "none"
)

loan_quotes_total = Counter(
    "coop_loan_quotes_total",
    "Total number of loan application quotes",
    ["tier", "outcome"],
)

penalties_assessed_total = Counter(
    "coop_penalties_assessed_total",
    "Total number of penalty calculations that produced a penalty",
)

penalty_amount = Histogram(
    "coop_penalty_amount",
    "Assessed overdue penalties in naira",
    buckets=[10, 50, 100, 500, 1000, 5000, 10000, 50000],
)

repayments_total = Counter(
    "coop_repayments_total",
    "Total number of repayments recorded",
    ["status"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

calculation_latency = Histogram(
    "coop_calculation_latency_seconds",
    "Calculation latency in seconds",
    ["operation"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)

http_requests_total = Counter(
    "coop_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "coop_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_eligibility(eligible: bool, reason: Optional[str]) -> None:
    """Record an eligibility check in metrics."""
    outcome = "eligible" if eligible else "ineligible"
    eligibility_checks_total.labels(outcome=outcome, reason=reason or "none").inc()


def record_loan_quote(tier: str, approved: bool) -> None:
    """Record a loan quote in metrics."""
    outcome = "approved" if approved else "declined"
    loan_quotes_total.labels(tier=tier, outcome=outcome).inc()


def record_penalty(penalty: int) -> None:
    """Record a penalty calculation; zero penalties are not counted."""
    if penalty > 0:
        penalties_assessed_total.inc()
        penalty_amount.observe(penalty)


def record_repayment(status: str) -> None:
    repayments_total.labels(status=status).inc()


@contextmanager
def track_calculation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track calculation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        calculation_latency.labels(operation=operation).observe(duration)


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

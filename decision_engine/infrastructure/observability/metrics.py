"""Prometheus metrics for monitoring decision outcomes and approved amounts"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | not_found | invalid | error
)

approved_amount_histogram = Histogram(
    "loan_approved_amount",
    "Approved loan amounts",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)

approved_period_histogram = Histogram(
    "loan_approved_period_months",
    "Approved loan periods in months",
    buckets=[12, 18, 24, 30, 36, 42, 48],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, loan_amount: Optional[int] = None, loan_period: Optional[int] = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is not None:
        approved_amount_histogram.observe(loan_amount)
    if loan_period is not None:
        approved_period_histogram.observe(loan_period)

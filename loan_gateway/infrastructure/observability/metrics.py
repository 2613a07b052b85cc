"""Prometheus metrics for monitoring eligibility outcomes, rate quotes, and request latency"""

from prometheus_client import Counter, Histogram

# Decision metrics
eligibility_decision_counter = Counter(
    "loan_eligibility_decisions_total",
    "Total eligibility evaluations",
    ["outcome", "risk_category"],  # eligible | ineligible; low | medium | high
)

approval_likelihood_histogram = Histogram(
    "loan_approval_likelihood",
    "Approval likelihood scores issued",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Rate quote metrics
rate_quote_counter = Counter(
    "loan_rate_quotes_total",
    "Total rate and schedule calculations",
    ["loan_type"],
)

# Request validation
validation_failure_counter = Counter(
    "loan_validation_failures_total",
    "Requests rejected by schema validation",
    ["endpoint"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_eligibility_decision(is_eligible: bool, risk_category: str, approval_likelihood: int) -> None:
    """Record decision metrics for monitoring approval rates and risk mix"""
    outcome = "eligible" if is_eligible else "ineligible"
    eligibility_decision_counter.labels(outcome=outcome, risk_category=risk_category).inc()
    approval_likelihood_histogram.observe(approval_likelihood)


def record_rate_quote(loan_type: str) -> None:
    rate_quote_counter.labels(loan_type=loan_type).inc()

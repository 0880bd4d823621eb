"""Prometheus metrics for calculation outcomes and request latency"""

from prometheus_client import Counter, Histogram

from bhxh_calculator.domain.models import CalculationResult

# Calculation metrics
calculation_counter = Counter(
    "bhxh_calculation_total",
    "Total lump-sum calculations requested",
    ["outcome"],  # computed | rejected
)

final_amount_histogram = Histogram(
    "bhxh_final_amount_vnd",
    "Final payable lump-sum amount in VND",
    buckets=[0, 10_000_000, 50_000_000, 100_000_000, 250_000_000, 500_000_000, 1_000_000_000],
)

periods_histogram = Histogram(
    "bhxh_periods_per_calculation",
    "Valid contribution periods per calculation",
    buckets=[1, 2, 5, 10, 25, 50, 100, 250],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(result: CalculationResult) -> None:
    """Record a successful calculation"""
    calculation_counter.labels(outcome="computed").inc()
    final_amount_histogram.observe(max(result.final_amount, 0.0))
    periods_histogram.observe(len(result.periods))


def record_rejection() -> None:
    """Record a calculation rejected for lack of valid periods"""
    calculation_counter.labels(outcome="rejected").inc()

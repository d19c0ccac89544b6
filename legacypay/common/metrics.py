"""Prometheus metric definitions shared across processors."""

from prometheus_client import Counter, generate_latest


payments_processed_total = Counter(
    "payments_processed_total",
    "Total payments processed by outcome",
    ["processor", "outcome"],
)
legacy_response_codes_total = Counter(
    "legacy_response_codes_total",
    "Legacy authorization response codes seen by the adapter",
    ["response_code"],
)
refunds_total = Counter("refunds_total", "Total refund requests", ["processor", "result"])
status_checks_total = Counter(
    "status_checks_total",
    "Total status queries by mapped status",
    ["processor", "status"],
)
validation_failures_total = Counter(
    "validation_failures_total",
    "Requests rejected before reaching a backend",
    ["processor", "field"],
)


def render_metrics() -> str:
    """Expose all registered Prometheus metrics in text format."""

    return generate_latest().decode("utf-8")

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "newsletter_requests_total",
    "Total HTTP requests to the newsletter service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "newsletter_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "newsletter_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
SUBSCRIPTIONS_CREATED = Counter(
    "newsletter_subscriptions_created_total",
    "Total successful newsletter sign-ups",
)
SUBSCRIPTIONS_REJECTED = Counter(
    "newsletter_subscriptions_rejected_total",
    "Total rejected sign-ups",
    ["reason"],
)
SUBSCRIBERS_DELETED = Counter(
    "newsletter_subscribers_deleted_total",
    "Total subscribers removed by an admin",
)
SUBSCRIBERS = Gauge(
    "newsletter_subscribers",
    "Current number of stored subscribers",
)

"""
Prometheus metrics for the license service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Session metrics
logins_total = Counter(
    "logins_total",
    "Login attempts by outcome",
    ["outcome"],
)

sessions_superseded_total = Counter(
    "sessions_superseded_total",
    "Sessions displaced by a login from another device",
)

session_refreshes_total = Counter(
    "session_refreshes_total",
    "Successful token refreshes",
)

session_checks_total = Counter(
    "session_checks_total",
    "Session validations by outcome",
    ["outcome"],
)

# Account metrics
accounts_created_total = Counter(
    "accounts_created_total",
    "Total accounts created",
)

accounts_deleted_total = Counter(
    "accounts_deleted_total",
    "Total accounts deleted",
)

licenses_extended_total = Counter(
    "licenses_extended_total",
    "Total license duration changes",
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)

"""
Observability middleware.

This middleware adds logging, metrics, and request tracing.
"""

import logging
import time
import uuid
from typing import Callable

from django.http import HttpRequest, HttpResponse
from opentelemetry import trace
from opentelemetry.trace import format_span_id, format_trace_id

from core.metrics import http_request_duration_seconds, http_requests_total

logger = logging.getLogger(__name__)


class ObservabilityMiddleware:
    """
    Middleware for request observability.

    This middleware:
    1. Generates correlation IDs for request tracing
    2. Logs request/response information
    3. Records request counts and durations in Prometheus
    4. Adds correlation ID to response headers
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request and add observability.

        Args:
            request: HTTP request

        Returns:
            HTTP response with observability headers
        """
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.correlation_id = correlation_id  # type: ignore

        trace_id, span_id = self._current_trace_context()
        if trace_id:
            request.trace_id = trace_id  # type: ignore

        start_time = time.monotonic()
        log_extra = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.path,
            "remote_addr": request.META.get("REMOTE_ADDR"),
        }
        if trace_id:
            log_extra["trace_id"] = trace_id
            log_extra["span_id"] = span_id
        logger.info("Request started", extra=log_extra)

        try:
            response = self.get_response(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={
                    **log_extra,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": round((time.monotonic() - start_time) * 1000, 2),
                },
                exc_info=True,
            )
            raise

        duration = time.monotonic() - start_time
        self._record_metrics(request, response, duration)
        self._log_response(response, log_extra, duration)

        response["X-Correlation-ID"] = correlation_id
        response["X-Request-Duration"] = f"{duration:.3f}"
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    def _current_trace_context(self):
        span_context = trace.get_current_span().get_span_context()
        if not span_context.is_valid:
            return None, None
        return format_trace_id(span_context.trace_id), format_span_id(span_context.span_id)

    def _endpoint(self, request: HttpRequest) -> str:
        # Route pattern rather than raw path keeps label cardinality bounded.
        match = getattr(request, "resolver_match", None)
        if match is not None and match.route:
            return match.route
        return "unmatched"

    def _record_metrics(self, request: HttpRequest, response: HttpResponse, duration: float):
        endpoint = self._endpoint(request)
        http_requests_total.labels(
            method=request.method, endpoint=endpoint, status_code=str(response.status_code)
        ).inc()
        http_request_duration_seconds.labels(method=request.method, endpoint=endpoint).observe(
            duration
        )

    def _log_response(self, response: HttpResponse, log_extra: dict, duration: float):
        """Log structured response information."""
        log_extra = {
            **log_extra,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }
        if response.status_code >= 500:
            logger.error("Request completed with server error", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", extra=log_extra)
        else:
            logger.info("Request completed successfully", extra=log_extra)

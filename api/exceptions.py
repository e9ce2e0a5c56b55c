"""
API exception handlers.

This module provides custom exception handling for REST API responses.
Every error is rendered as ``{"error": {"code": ..., "message": ...}}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    AccountStoreError,
    AuthenticationError,
    AuthorizationError,
    DomainException,
    InvalidDurationError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

# First match wins; order from most to least specific.
DOMAIN_STATUS_CODES = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (AccountNotFoundError, status.HTTP_404_NOT_FOUND),
    (AccountAlreadyExistsError, status.HTTP_409_CONFLICT),
    (InvalidDurationError, status.HTTP_400_BAD_REQUEST),
    (AccountStoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


class APIError(APIException):
    """Base API exception with error code."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "An error occurred"
    default_code = "api_error"

    def __init__(self, detail=None, code=None, status_code=None):
        """
        Initialize API error.

        Args:
            detail: Error message
            code: Error code
            status_code: HTTP status code
        """
        if status_code:
            self.status_code = status_code
        if code:
            self.default_code = code
        super().__init__(detail)


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)
    endpoint = _get_endpoint(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
        errors_total.labels(error_type=exc.code, endpoint=endpoint).inc()
    elif isinstance(exc, ValidationError):
        response = Response(
            {
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": exc.detail,
                }
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
        errors_total.labels(error_type="VALIDATION_ERROR", endpoint=endpoint).inc()
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = _error_code(exc)
        message = response.data.get("detail", exc.default_detail)
        response.data = {"error": {"code": code, "message": str(message)}}
        errors_total.labels(error_type=code, endpoint=endpoint).inc()
    elif isinstance(exc, Http404):
        response = Response(
            {"error": {"code": "NOT_FOUND", "message": "Resource not found"}},
            status=status.HTTP_404_NOT_FOUND,
        )
        errors_total.labels(error_type="NOT_FOUND", endpoint=endpoint).inc()
    else:
        response = _handle_unexpected_exception(exc, trace_id)
        errors_total.labels(error_type="INTERNAL_ERROR", endpoint=endpoint).inc()

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _get_endpoint(context: Dict[str, Any]) -> str:
    request = context.get("request")
    match = getattr(request, "resolver_match", None) if request else None
    if match is not None and match.route:
        return match.route
    return "unknown"


def _error_code(exc: APIException) -> str:
    if isinstance(exc, APIError):
        return exc.default_code
    return str(exc.default_code).upper().replace("-", "_")


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    for exc_type, mapped_status in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            status_code = mapped_status
            break

    if isinstance(exc, AccountStoreError):
        logger.error(
            "Account store failure: %s", exc.message, extra={"trace_id": trace_id}, exc_info=exc
        )
    else:
        logger.warning(
            "Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id}
        )
    return Response({"error": {"code": exc.code, "message": exc.message}}, status=status_code)


def _handle_unexpected_exception(exc: Exception, trace_id: Optional[str]) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=exc)
    return Response(
        {"error": {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

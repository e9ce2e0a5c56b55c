"""
Admin key authentication middleware.

Administrative endpoints are guarded by a single shared secret sent in
the ``X-Admin-Key`` header.
"""

import logging
import secrets
from typing import Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from core.metrics import errors_total

logger = logging.getLogger(__name__)

ADMIN_PATH_PREFIX = "/api/v1/admin/"
ADMIN_KEY_HEADER = "X-Admin-Key"


class AdminKeyAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for admin key authentication.

    This middleware:
    1. Applies only to admin APIs (/api/v1/admin/*)
    2. Compares the X-Admin-Key header to settings.ADMIN_KEY in constant time
    3. Returns 403 Forbidden if the key is missing or wrong
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate the admin key.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 403 if authentication fails, None otherwise
        """
        if not request.path.startswith(ADMIN_PATH_PREFIX):
            return None

        expected = getattr(settings, "ADMIN_KEY", "")
        provided = request.headers.get(ADMIN_KEY_HEADER, "")

        if not expected:
            logger.error("ADMIN_KEY is not configured; rejecting admin request")
            return self._reject(request, "Admin API is not configured")

        if not provided or not secrets.compare_digest(provided.encode(), expected.encode()):
            logger.warning("Invalid admin key attempted on %s", request.path)
            return self._reject(request, "Invalid admin key")

        return None

    def _reject(self, request: HttpRequest, message: str) -> HttpResponse:
        errors_total.labels(error_type="INVALID_ADMIN_KEY", endpoint=request.path).inc()
        return JsonResponse(
            {"error": {"code": "INVALID_ADMIN_KEY", "message": message}},
            status=403,
        )

"""
Auth API views.

These endpoints are used by client devices to:
- Log in and take over the account's single session
- Refresh a live token
- Check the session and remaining license time
- Validate an (email, device, token) triple (diagnostic)
"""

from typing import Tuple

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from api.exceptions import APIError
from api.v1.auth.serializers import (
    LoginRequestSerializer,
    SessionStatusResponseSerializer,
    SessionTokenResponseSerializer,
    ValidateSessionRequestSerializer,
    ValidateSessionResponseSerializer,
)
from core.domain.value_objects import DeviceIdentifier
from core.instrumentation import Status, StatusCode, get_tracer
from device_sessions.application.commands.login import LoginCommand
from device_sessions.application.commands.refresh_session import RefreshSessionCommand
from device_sessions.application.handlers.login_handler import LoginHandler
from device_sessions.application.handlers.refresh_session_handler import (
    RefreshSessionHandler,
)
from device_sessions.application.handlers.session_query_handlers import (
    CheckSessionHandler,
    ValidateSessionHandler,
)
from device_sessions.application.queries.check_session import CheckSessionQuery
from device_sessions.application.queries.validate_session import ValidateSessionQuery
from device_sessions.application.services.session_services import (
    build_session_registry,
    build_session_validator,
    build_token_issuer,
)

_account_repo = DjangoAccountRepository()

tracer = get_tracer(__name__)

SESSION_HEADERS = [
    OpenApiParameter(
        name="Authorization",
        type=str,
        location=OpenApiParameter.HEADER,
        required=True,
        description="Bearer token returned by login or refresh",
    ),
    OpenApiParameter(
        name="X-Device-ID",
        type=str,
        location=OpenApiParameter.HEADER,
        required=True,
        description="Identifier of the calling device",
    ),
]


def get_session_credentials(request: Request) -> Tuple[str, str]:
    """
    Read the bearer token and device identifier from request headers.

    Raises:
        APIError: 400 if either header is missing or malformed
    """
    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise APIError(
            "Authorization header with a Bearer token is required",
            code="MISSING_TOKEN",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        device_id = DeviceIdentifier(request.headers.get("X-Device-ID", ""))
    except ValueError as e:
        raise APIError(
            f"X-Device-ID header is required: {e}",
            code="MISSING_DEVICE_ID",
            status_code=status.HTTP_400_BAD_REQUEST,
        ) from e
    return token, str(device_id)


class LoginView(APIView):
    """View for logging in on a device."""

    @extend_schema(
        operation_id="login",
        summary="Log In",
        description=(
            "Authenticate with email and password on a device. The first successful "
            "login starts the license clock. Any session held by another device is "
            "superseded. The token expires when the license does."
        ),
        tags=["Auth API"],
        request=LoginRequestSerializer,
        responses={
            200: SessionTokenResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid credentials"},
            403: {"description": "License expired"},
        },
    )
    def post(self, request: Request) -> Response:
        """Log an account in on a device."""
        return async_to_sync(self._handle_login)(request)

    async def _handle_login(self, request: Request) -> Response:
        """Async handler for login."""
        with tracer.start_as_current_span("login") as span:
            span.set_attribute("operation", "login")

            serializer = LoginRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                serializer.is_valid(raise_exception=True)

            email = serializer.validated_data["email"]
            device_id = serializer.validated_data["device_id"]
            span.set_attribute("account.email", email)
            span.set_attribute("device.id", device_id)

            handler = LoginHandler(
                account_repository=_account_repo,
                registry=build_session_registry(),
                token_issuer=build_token_issuer(),
            )
            command = LoginCommand(
                email=email,
                password=serializer.validated_data["password"],
                device_id=device_id,
            )

            result = await handler.handle(command)

            span.set_attribute("license.remaining_seconds", result.remaining_seconds)
            span.set_status(Status(StatusCode.OK))
            return Response(
                SessionTokenResponseSerializer(result).data, status=status.HTTP_200_OK
            )


class RefreshSessionView(APIView):
    """View for refreshing a live token."""

    @extend_schema(
        operation_id="refresh_session",
        summary="Refresh Token",
        description=(
            "Trade a live token for a new one on the same device. The new token's "
            "lifetime is recomputed from the account's current license."
        ),
        tags=["Auth API"],
        parameters=SESSION_HEADERS,
        request=None,
        responses={
            200: SessionTokenResponseSerializer,
            400: {"description": "Missing Authorization or X-Device-ID header"},
            401: {"description": "Invalid or expired token"},
            403: {"description": "Session superseded or license expired"},
        },
    )
    def post(self, request: Request) -> Response:
        """Refresh a session token."""
        return async_to_sync(self._handle_refresh)(request)

    async def _handle_refresh(self, request: Request) -> Response:
        """Async handler for refresh."""
        with tracer.start_as_current_span("refresh_session") as span:
            span.set_attribute("operation", "refresh_session")

            token, device_id = get_session_credentials(request)
            span.set_attribute("device.id", device_id)

            token_issuer = build_token_issuer()
            registry = build_session_registry()
            handler = RefreshSessionHandler(
                validator=build_session_validator(token_issuer=token_issuer, registry=registry),
                registry=registry,
                token_issuer=token_issuer,
            )

            result = await handler.handle(RefreshSessionCommand(token=token, device_id=device_id))

            span.set_attribute("account.email", result.email)
            span.set_attribute("license.remaining_seconds", result.remaining_seconds)
            span.set_status(Status(StatusCode.OK))
            return Response(
                SessionTokenResponseSerializer(result).data, status=status.HTTP_200_OK
            )


class CheckSessionView(APIView):
    """View for checking a session."""

    @extend_schema(
        operation_id="check_session",
        summary="Check Session",
        description=(
            "Confirm the token is the account's live session on this device and "
            "return the remaining license time. Nothing is modified."
        ),
        tags=["Auth API"],
        parameters=SESSION_HEADERS,
        responses={
            200: SessionStatusResponseSerializer,
            400: {"description": "Missing Authorization or X-Device-ID header"},
            401: {"description": "Invalid or expired token"},
            403: {"description": "Session superseded or license expired"},
        },
    )
    def get(self, request: Request) -> Response:
        """Check a session."""
        return async_to_sync(self._handle_check)(request)

    async def _handle_check(self, request: Request) -> Response:
        """Async handler for check."""
        with tracer.start_as_current_span("check_session") as span:
            span.set_attribute("operation", "check_session")

            token, device_id = get_session_credentials(request)
            span.set_attribute("device.id", device_id)

            handler = CheckSessionHandler(validator=build_session_validator())
            result = await handler.handle(CheckSessionQuery(token=token, device_id=device_id))

            span.set_attribute("account.email", result.email)
            span.set_attribute("license.remaining_seconds", result.remaining_seconds)
            span.set_status(Status(StatusCode.OK))
            return Response(
                SessionStatusResponseSerializer(result).data, status=status.HTTP_200_OK
            )


class ValidateSessionView(APIView):
    """View for the diagnostic session validation."""

    @extend_schema(
        operation_id="validate_session",
        summary="Validate Session",
        description=(
            "Report whether a token is the account's current session on a device. "
            "Token problems answer valid=false rather than an error."
        ),
        tags=["Auth API"],
        request=ValidateSessionRequestSerializer,
        responses={
            200: ValidateSessionResponseSerializer,
            400: {"description": "Bad Request"},
        },
    )
    def post(self, request: Request) -> Response:
        """Validate an (email, device, token) triple."""
        return async_to_sync(self._handle_validate)(request)

    async def _handle_validate(self, request: Request) -> Response:
        """Async handler for validate session."""
        with tracer.start_as_current_span("validate_session") as span:
            span.set_attribute("operation", "validate_session")

            serializer = ValidateSessionRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            handler = ValidateSessionHandler(
                registry=build_session_registry(), token_issuer=build_token_issuer()
            )
            query = ValidateSessionQuery(
                email=serializer.validated_data["email"],
                device_id=serializer.validated_data["device_id"],
                token=serializer.validated_data["token"],
            )

            result = await handler.handle(query)

            span.set_attribute("session.valid", result.valid)
            span.set_status(Status(StatusCode.OK))
            return Response(
                ValidateSessionResponseSerializer(result).data, status=status.HTTP_200_OK
            )

"""
Admin API views.

These endpoints are used by operators to:
- Create and list accounts
- Delete an account together with its session
- Extend (or shorten) an account's license duration

The X-Admin-Key header is checked by AdminKeyAuthenticationMiddleware
before any of these views run.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.create_account import CreateAccountCommand
from accounts.application.commands.delete_account import DeleteAccountCommand
from accounts.application.commands.extend_license import ExtendLicenseCommand
from accounts.application.handlers.account_admin_handlers import (
    DeleteAccountHandler,
    ExtendLicenseHandler,
    ListAccountsHandler,
)
from accounts.application.handlers.create_account_handler import CreateAccountHandler
from accounts.application.queries.list_accounts import ListAccountsQuery
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from api.v1.admin.serializers import (
    AccountSerializer,
    CreateAccountRequestSerializer,
    CreateAccountResponseSerializer,
    ExtendLicenseRequestSerializer,
    ExtendLicenseResponseSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_account_repo = DjangoAccountRepository()

tracer = get_tracer(__name__)

ADMIN_KEY_PARAMETER = OpenApiParameter(
    name="X-Admin-Key",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="Shared administrator secret",
)


class AccountsView(APIView):
    """View for creating and listing accounts."""

    @extend_schema(
        operation_id="create_account",
        summary="Create Account",
        description=(
            "Provision an account with a total license duration in seconds. "
            "The license clock starts at the account's first login."
        ),
        tags=["Admin API"],
        parameters=[ADMIN_KEY_PARAMETER],
        request=CreateAccountRequestSerializer,
        responses={
            201: CreateAccountResponseSerializer,
            400: {"description": "Bad Request"},
            403: {"description": "Invalid admin key"},
            409: {"description": "Account already exists"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an account."""
        return async_to_sync(self._handle_create_account)(request)

    async def _handle_create_account(self, request: Request) -> Response:
        """Async handler for create account."""
        with tracer.start_as_current_span("create_account") as span:
            span.set_attribute("operation", "create_account")

            serializer = CreateAccountRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            span.set_attribute("account.email", serializer.validated_data["email"])

            handler = CreateAccountHandler(account_repository=_account_repo)
            command = CreateAccountCommand(
                email=serializer.validated_data["email"],
                password=serializer.validated_data["password"],
                duration_seconds=serializer.validated_data["duration_seconds"],
            )

            result = await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return Response(
                CreateAccountResponseSerializer(result).data, status=status.HTTP_201_CREATED
            )

    @extend_schema(
        operation_id="list_accounts",
        summary="List Accounts",
        description="List every account with its activation time and remaining license time.",
        tags=["Admin API"],
        parameters=[ADMIN_KEY_PARAMETER],
        responses={
            200: AccountSerializer(many=True),
            403: {"description": "Invalid admin key"},
        },
    )
    def get(self, request: Request) -> Response:
        """List accounts."""
        return async_to_sync(self._handle_list_accounts)(request)

    async def _handle_list_accounts(self, request: Request) -> Response:
        """Async handler for list accounts."""
        with tracer.start_as_current_span("list_accounts") as span:
            span.set_attribute("operation", "list_accounts")

            handler = ListAccountsHandler(account_repository=_account_repo)
            result = await handler.handle(ListAccountsQuery())

            span.set_attribute("accounts.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(AccountSerializer(result, many=True).data, status=status.HTTP_200_OK)


class AccountDetailView(APIView):
    """View for deleting an account."""

    @extend_schema(
        operation_id="delete_account",
        summary="Delete Account",
        description="Delete an account. Its device session is removed with it.",
        tags=["Admin API"],
        parameters=[ADMIN_KEY_PARAMETER],
        responses={
            200: {"description": "Account deleted"},
            403: {"description": "Invalid admin key"},
            404: {"description": "Account not found"},
        },
    )
    def delete(self, request: Request, email: str) -> Response:
        """Delete an account."""
        return async_to_sync(self._handle_delete_account)(request, email)

    async def _handle_delete_account(self, request: Request, email: str) -> Response:
        """Async handler for delete account."""
        with tracer.start_as_current_span("delete_account") as span:
            span.set_attribute("operation", "delete_account")
            span.set_attribute("account.email", email)

            handler = DeleteAccountHandler(account_repository=_account_repo)
            await handler.handle(DeleteAccountCommand(email=email))

            span.set_status(Status(StatusCode.OK))
            return Response(
                {"email": email, "message": "Account deleted successfully"},
                status=status.HTTP_200_OK,
            )


class AccountDurationView(APIView):
    """View for extending an account's license."""

    @extend_schema(
        operation_id="extend_license",
        summary="Extend License",
        description=(
            "Add extra_seconds to the account's total license duration. A negative "
            "value shortens it, down to zero. The activation time is never changed, "
            "so an expired license with added time becomes usable again without a "
            "new login."
        ),
        tags=["Admin API"],
        parameters=[ADMIN_KEY_PARAMETER],
        request=ExtendLicenseRequestSerializer,
        responses={
            200: ExtendLicenseResponseSerializer,
            400: {"description": "Invalid duration"},
            403: {"description": "Invalid admin key"},
            404: {"description": "Account not found"},
        },
    )
    def patch(self, request: Request, email: str) -> Response:
        """Extend an account's license."""
        return async_to_sync(self._handle_extend_license)(request, email)

    async def _handle_extend_license(self, request: Request, email: str) -> Response:
        """Async handler for extend license."""
        with tracer.start_as_current_span("extend_license") as span:
            span.set_attribute("operation", "extend_license")
            span.set_attribute("account.email", email)

            serializer = ExtendLicenseRequestSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            extra_seconds = serializer.validated_data["extra_seconds"]
            span.set_attribute("license.extra_seconds", extra_seconds)

            handler = ExtendLicenseHandler(account_repository=_account_repo)
            result = await handler.handle(
                ExtendLicenseCommand(email=email, extra_seconds=extra_seconds)
            )

            span.set_attribute("license.duration_seconds", result.duration_seconds)
            span.set_status(Status(StatusCode.OK))
            return Response(
                ExtendLicenseResponseSerializer(result).data, status=status.HTTP_200_OK
            )

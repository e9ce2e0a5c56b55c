"""
Pytest configuration and shared fixtures.
"""

import pytest
from asgiref.sync import async_to_sync
from django.conf import settings

from accounts.domain.account import Account
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from device_sessions.application.handlers.login_handler import LoginHandler
from device_sessions.application.handlers.refresh_session_handler import (
    RefreshSessionHandler,
)
from device_sessions.application.handlers.session_query_handlers import (
    CheckSessionHandler,
    ValidateSessionHandler,
)
from device_sessions.domain.services import SessionRegistry, SessionValidator
from device_sessions.domain.token_issuer import TokenIssuer
from device_sessions.infrastructure.repositories.django_session_repository import (
    DjangoSessionRepository,
)
from tests.fakes import (
    PASSWORD,
    TEST_SECRET,
    FakeClock,
    InMemoryAccountRepository,
    InMemorySessionRepository,
)


@pytest.fixture
def clock():
    """Fixture for a controllable clock starting at T0."""
    return FakeClock()


@pytest.fixture
def session_repository():
    """Fixture for an in-memory SessionRepository."""
    return InMemorySessionRepository()


@pytest.fixture
def account_repository(session_repository):
    """Fixture for an in-memory AccountRepository."""
    return InMemoryAccountRepository(sessions=session_repository)


@pytest.fixture
def token_issuer(clock):
    """Fixture for a TokenIssuer reading the test clock."""
    return TokenIssuer(secret=TEST_SECRET, clock=clock)


@pytest.fixture
def registry(session_repository):
    """Fixture for SessionRegistry."""
    return SessionRegistry(session_repository)


@pytest.fixture
def validator(token_issuer, account_repository, registry, clock):
    """Fixture for SessionValidator."""
    return SessionValidator(
        token_issuer=token_issuer,
        account_repository=account_repository,
        registry=registry,
        clock=clock,
    )


@pytest.fixture
def login_handler(account_repository, registry, token_issuer, clock):
    """Fixture for LoginHandler."""
    return LoginHandler(
        account_repository=account_repository,
        registry=registry,
        token_issuer=token_issuer,
        clock=clock,
    )


@pytest.fixture
def refresh_handler(validator, registry, token_issuer):
    """Fixture for RefreshSessionHandler."""
    return RefreshSessionHandler(validator=validator, registry=registry, token_issuer=token_issuer)


@pytest.fixture
def check_handler(validator):
    """Fixture for CheckSessionHandler."""
    return CheckSessionHandler(validator=validator)


@pytest.fixture
def validate_handler(registry, token_issuer):
    """Fixture for ValidateSessionHandler."""
    return ValidateSessionHandler(registry=registry, token_issuer=token_issuer)


@pytest.fixture
def make_account(account_repository, clock):
    """Factory fixture storing an account in the in-memory repository."""

    async def _make(email="user@example.com", duration_seconds=3600, password=PASSWORD):
        account = Account.create(
            email=email,
            raw_password=password,
            duration_seconds=duration_seconds,
            now=clock(),
        )
        return await account_repository.add(account)

    return _make


@pytest.fixture
def django_account_repository():
    """Fixture for DjangoAccountRepository."""
    return DjangoAccountRepository()


@pytest.fixture
def django_session_repository():
    """Fixture for DjangoSessionRepository."""
    return DjangoSessionRepository()


@pytest.fixture
def db_account(db, django_account_repository):
    """Fixture for an Account saved in the database."""
    from django.utils import timezone

    account = Account.create(
        email="stored@example.com",
        raw_password=PASSWORD,
        duration_seconds=3600,
        now=timezone.now(),
    )
    return async_to_sync(django_account_repository.add)(account)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_client(api_client):
    """Fixture for an API client sending the admin key."""
    api_client.credentials(HTTP_X_ADMIN_KEY=settings.ADMIN_KEY)
    return api_client

"""
Wiring of the session collaborators from Django settings.

Views and management commands build their handlers through these
functions so every entry point shares one configuration.
"""

from django.conf import settings

from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from device_sessions.domain.services import SessionRegistry, SessionValidator
from device_sessions.domain.token_issuer import TokenIssuer
from device_sessions.infrastructure.repositories.django_session_repository import (
    DjangoSessionRepository,
)


def build_token_issuer() -> TokenIssuer:
    """Create a TokenIssuer from the LICENSE_TOKEN_* settings."""
    return TokenIssuer(
        secret=settings.LICENSE_TOKEN_SECRET,
        algorithm=settings.LICENSE_TOKEN_ALGORITHM,
        issuer=settings.LICENSE_TOKEN_ISSUER,
        leeway_seconds=settings.LICENSE_TOKEN_LEEWAY_SECONDS,
    )


def build_session_registry() -> SessionRegistry:
    return SessionRegistry(DjangoSessionRepository())


def build_session_validator(
    token_issuer: TokenIssuer = None, registry: SessionRegistry = None
) -> SessionValidator:
    return SessionValidator(
        token_issuer=token_issuer or build_token_issuer(),
        account_repository=DjangoAccountRepository(),
        registry=registry or build_session_registry(),
    )

"""
Session query handlers.

Read-only handlers: check a live session, and the diagnostic
session validation.
"""

import logging

from core.domain.exceptions import AuthenticationError, AuthorizationError
from core.metrics import session_checks_total
from device_sessions.application.dto.session_dto import SessionStatusDTO, SessionValidityDTO
from device_sessions.application.queries.check_session import CheckSessionQuery
from device_sessions.application.queries.validate_session import ValidateSessionQuery
from device_sessions.domain.services import SessionRegistry, SessionValidator
from device_sessions.domain.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)


class CheckSessionHandler:
    """Handler for CheckSessionQuery."""

    def __init__(self, validator: SessionValidator):
        self.validator = validator

    async def handle(self, query: CheckSessionQuery) -> SessionStatusDTO:
        """
        Handle check query. Nothing is written.

        Raises:
            AuthenticationError: Token invalid, expired, or account gone
            AuthorizationError: Session superseded or license expired
        """
        try:
            validated = await self.validator.validate(query.token, query.device_id)
        except (AuthenticationError, AuthorizationError) as e:
            session_checks_total.labels(outcome=e.code.lower()).inc()
            raise

        session_checks_total.labels(outcome="success").inc()
        return SessionStatusDTO(
            email=validated.email,
            device_id=validated.device_id,
            remaining_seconds=validated.remaining_seconds,
            license_expires_at=validated.account.license_expires_at(),
        )


class ValidateSessionHandler:
    """Handler for ValidateSessionQuery."""

    def __init__(self, registry: SessionRegistry, token_issuer: TokenIssuer):
        self.registry = registry
        self.token_issuer = token_issuer

    async def handle(self, query: ValidateSessionQuery) -> SessionValidityDTO:
        """
        Handle validate query.

        Token failures answer ``valid: false``; store errors propagate.
        """
        try:
            claims = self.token_issuer.verify(query.token)
        except AuthenticationError as e:
            logger.debug("Session validation for %s failed: %s", query.email, e.code)
            return SessionValidityDTO(valid=False)

        if claims.email != query.email or claims.device_id != query.device_id:
            return SessionValidityDTO(valid=False)

        valid = await self.registry.matches(query.email, query.device_id, query.token)
        return SessionValidityDTO(valid=valid)

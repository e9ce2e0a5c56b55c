"""
RefreshSessionHandler.

Handler for trading a live token for a fresh one.
"""

import logging

from core.metrics import session_refreshes_total
from device_sessions.application.commands.refresh_session import RefreshSessionCommand
from device_sessions.application.dto.session_dto import SessionTokenDTO
from device_sessions.domain.services import SessionRegistry, SessionValidator
from device_sessions.domain.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)


class RefreshSessionHandler:
    """Handler for RefreshSessionCommand."""

    def __init__(
        self,
        validator: SessionValidator,
        registry: SessionRegistry,
        token_issuer: TokenIssuer,
    ):
        """Initialize handler with collaborators."""
        self.validator = validator
        self.registry = registry
        self.token_issuer = token_issuer

    async def handle(self, command: RefreshSessionCommand) -> SessionTokenDTO:
        """
        Handle refresh command.

        The new lifetime comes from the account as stored now, never from
        the old token, so a duration change since the last issue applies.

        Raises:
            AuthenticationError: Token invalid, expired, or account gone
            SessionSupersededError: Another device holds the session
            LicenseExpiredError: No license time remains
        """
        validated = await self.validator.validate(command.token, command.device_id)
        now = validated.validated_at
        remaining = validated.remaining_seconds

        token = self.token_issuer.issue(validated.email, command.device_id, remaining, now=now)
        await self.registry.reassert(
            validated.email, command.device_id, command.token, token, now
        )

        session_refreshes_total.inc()
        logger.info("Session refreshed for %s on %s", validated.email, command.device_id)

        return SessionTokenDTO(
            token=token,
            email=validated.email,
            device_id=command.device_id,
            remaining_seconds=remaining,
            expires_at=TokenIssuer.expiry(now, remaining),
        )

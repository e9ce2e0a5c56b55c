"""
LoginHandler.

Handler for logging an account in on a device.
"""

import logging

from accounts.domain.events import AccountActivated
from accounts.domain.license_clock import Clock, system_clock
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import InvalidCredentialsError, LicenseExpiredError
from core.infrastructure.events import event_bus
from core.metrics import logins_total, sessions_superseded_total
from device_sessions.application.commands.login import LoginCommand
from device_sessions.application.dto.session_dto import SessionTokenDTO
from device_sessions.domain.events import SessionEstablished, SessionSuperseded
from device_sessions.domain.services import SessionRegistry
from device_sessions.domain.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)


class LoginHandler:
    """Handler for LoginCommand."""

    def __init__(
        self,
        account_repository: AccountRepository,
        registry: SessionRegistry,
        token_issuer: TokenIssuer,
        clock: Clock = system_clock,
    ):
        """Initialize handler with collaborators."""
        self.account_repository = account_repository
        self.registry = registry
        self.token_issuer = token_issuer
        self.clock = clock

    async def handle(self, command: LoginCommand) -> SessionTokenDTO:
        """
        Handle login command.

        Args:
            command: LoginCommand

        Returns:
            SessionTokenDTO with a token valid for the remaining license time

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            LicenseExpiredError: No license time remains, including an
                account whose duration was already used up at activation
        """
        account = await self.account_repository.find_by_email(command.email)
        if account is None or not account.check_password(command.password):
            logins_total.labels(outcome="invalid_credentials").inc()
            logger.warning("Login rejected for %s: invalid credentials", command.email)
            raise InvalidCredentialsError()

        now = self.clock()
        if not account.is_activated:
            account, activated = await self.account_repository.set_activation_time_if_unset(
                command.email, now
            )
            if account is None:
                logins_total.labels(outcome="invalid_credentials").inc()
                raise InvalidCredentialsError()
            if activated:
                logger.info("Account %s activated at %s", command.email, account.activated_at)
                await event_bus.publish(
                    AccountActivated(email=command.email, activated_at=account.activated_at)
                )

        remaining = account.remaining_seconds(now)
        if remaining <= 0:
            logins_total.labels(outcome="expired").inc()
            logger.info("Login rejected for %s: license expired", command.email)
            raise LicenseExpiredError()

        token = self.token_issuer.issue(command.email, command.device_id, remaining, now=now)
        session, superseded = await self.registry.establish(
            command.email, command.device_id, token, now
        )

        logins_total.labels(outcome="success").inc()
        await event_bus.publish(
            SessionEstablished(
                email=command.email,
                device_id=command.device_id,
                established_at=session.established_at,
            )
        )
        if superseded is not None:
            sessions_superseded_total.inc()
            await event_bus.publish(
                SessionSuperseded(
                    email=command.email,
                    previous_device_id=str(superseded.device_id),
                    new_device_id=command.device_id,
                    superseded_at=now,
                )
            )

        return SessionTokenDTO(
            token=token,
            email=command.email,
            device_id=command.device_id,
            remaining_seconds=remaining,
            expires_at=TokenIssuer.expiry(now, remaining),
        )

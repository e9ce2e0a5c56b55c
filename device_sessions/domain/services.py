"""
Session domain services.

SessionRegistry enforces one active device per account; SessionValidator
is the gate every protected operation passes through.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from accounts.domain.account import Account
from accounts.domain.license_clock import Clock, LicenseClock, system_clock
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import (
    LicenseExpiredError,
    SessionSupersededError,
    UnknownAccountError,
)
from device_sessions.domain.session import DeviceSession
from device_sessions.domain.token_issuer import TokenClaims, TokenIssuer
from device_sessions.ports.session_repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Domain service recording the single authorised (account, device, token).

    Exclusivity is persisted server side: device identifiers come from
    the client and prove nothing on their own.
    """

    def __init__(self, repository: SessionRepository):
        self.repository = repository

    async def establish(
        self, email: str, device_id: str, token: str, now: datetime
    ) -> Tuple[DeviceSession, Optional[DeviceSession]]:
        """
        Make (device_id, token) the account's only session.

        Returns:
            Tuple of (new session, superseded session of a different
            device or None)
        """
        session = DeviceSession.create(email=email, device_id=device_id, token=token, now=now)
        stored, previous = await self.repository.establish(session)
        if previous is not None and not previous.is_same_device(device_id):
            logger.info(
                "Session for %s moved from device %s to %s",
                email,
                previous.device_id,
                device_id,
            )
            return stored, previous
        return stored, None

    async def current(self, email: str) -> Optional[DeviceSession]:
        """Return the account's session, if any."""
        return await self.repository.find_by_account(email)

    async def matches(self, email: str, device_id: str, token: str) -> bool:
        """True only if device and token both equal the stored session."""
        session = await self.repository.find_by_account(email)
        if session is None:
            return False
        return session.matches(device_id, token)

    async def reassert(
        self,
        email: str,
        device_id: str,
        previous_token: str,
        new_token: str,
        now: datetime,
    ) -> DeviceSession:
        """
        Swap the token of the current session for the same device.

        Raises:
            SessionSupersededError: If another login replaced the session
                after the caller validated it
        """
        session = await self.repository.replace_token(
            email, device_id, previous_token, new_token, now
        )
        if session is None:
            raise SessionSupersededError()
        return session


@dataclass(frozen=True)
class ValidatedSession:
    """Result of a successful validation."""

    account: Account
    claims: TokenClaims
    remaining_seconds: int
    validated_at: datetime

    @property
    def email(self) -> str:
        return str(self.account.email)

    @property
    def device_id(self) -> str:
        return self.claims.device_id


class SessionValidator:
    """
    Gate for protected operations.

    The checks run in a fixed order so each failure has its own error:
    token, then account, then device exclusivity, then license time.
    """

    def __init__(
        self,
        token_issuer: TokenIssuer,
        account_repository: AccountRepository,
        registry: SessionRegistry,
        clock: Clock = system_clock,
    ):
        self.token_issuer = token_issuer
        self.account_repository = account_repository
        self.registry = registry
        self.clock = clock

    async def validate(self, token: str, device_id: str) -> ValidatedSession:
        """
        Validate a presented token for a claimed device.

        Raises:
            InvalidTokenError: Token is malformed or badly signed
            TokenExpiredError: Token expiry has passed
            UnknownAccountError: Token names a deleted account
            SessionSupersededError: Another device holds the session
            LicenseExpiredError: No license time remains
        """
        claims = self.token_issuer.verify(token)

        account = await self.account_repository.find_by_email(claims.email)
        if account is None:
            raise UnknownAccountError()

        if claims.device_id != device_id or not await self.registry.matches(
            claims.email, device_id, token
        ):
            raise SessionSupersededError()

        now = self.clock()
        if account.activated_at is None:
            remaining = 0
        else:
            remaining = LicenseClock.remaining(account.duration_seconds, account.activated_at, now)
        if remaining <= 0:
            raise LicenseExpiredError()

        return ValidatedSession(
            account=account,
            claims=claims,
            remaining_seconds=remaining,
            validated_at=now,
        )

"""
In-memory fakes for unit tests.

The fakes honour the same contracts as the Django repositories
(conditional activation, upsert by account, conditional token swap)
without touching the database.
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from accounts.domain.account import Account
from accounts.domain.license_clock import MAX_DURATION_SECONDS
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import (
    AccountAlreadyExistsError,
    AccountStoreError,
    InvalidDurationError,
)
from core.domain.value_objects import DeviceIdentifier
from device_sessions.domain.session import DeviceSession
from device_sessions.ports.session_repository import SessionRepository

T0 = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
TEST_SECRET = "unit-test-token-secret-0123456789abcdef"
PASSWORD = "correct horse battery staple"


class FakeClock:
    """Controllable clock; call it to read the time."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class InMemoryAccountRepository(AccountRepository):
    """AccountRepository backed by a dict keyed by email."""

    def __init__(self, sessions: Optional["InMemorySessionRepository"] = None):
        self.accounts: Dict[str, Account] = {}
        self.sessions = sessions
        self.fail_with: Optional[Exception] = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def add(self, account: Account) -> Account:
        self._check()
        email = str(account.email)
        if email in self.accounts:
            raise AccountAlreadyExistsError(f"Account {email} already exists")
        self.accounts[email] = account
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        self._check()
        return self.accounts.get(email)

    async def list_all(self) -> List[Account]:
        self._check()
        return sorted(self.accounts.values(), key=lambda account: account.created_at)

    async def delete(self, email: str) -> bool:
        self._check()
        if email not in self.accounts:
            return False
        del self.accounts[email]
        if self.sessions is not None:
            self.sessions.sessions.pop(email, None)
        return True

    async def set_activation_time_if_unset(
        self, email: str, now: datetime
    ) -> Tuple[Optional[Account], bool]:
        self._check()
        account = self.accounts.get(email)
        if account is None:
            return None, False
        if account.activated_at is not None:
            return account, False
        self.accounts[email] = account.activate(now)
        return self.accounts[email], True

    async def extend_duration(
        self, email: str, extra_seconds: int, now: datetime
    ) -> Optional[Account]:
        self._check()
        account = self.accounts.get(email)
        if account is None:
            return None
        if not 0 <= account.duration_seconds + extra_seconds <= MAX_DURATION_SECONDS:
            raise InvalidDurationError("License duration out of range")
        self.accounts[email] = replace(
            account,
            duration_seconds=account.duration_seconds + extra_seconds,
            updated_at=now,
        )
        return self.accounts[email]

    async def exists(self, email: str) -> bool:
        self._check()
        return email in self.accounts


class InMemorySessionRepository(SessionRepository):
    """SessionRepository backed by a dict keyed by email."""

    def __init__(self):
        self.sessions: Dict[str, DeviceSession] = {}
        self.fail_with: Optional[Exception] = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def find_by_account(self, email: str) -> Optional[DeviceSession]:
        self._check()
        return self.sessions.get(email)

    async def establish(
        self, session: DeviceSession
    ) -> Tuple[DeviceSession, Optional[DeviceSession]]:
        self._check()
        email = str(session.email)
        previous = self.sessions.get(email)
        self.sessions[email] = session
        return session, previous

    async def replace_token(
        self,
        email: str,
        device_id: str,
        expected_token: str,
        new_token: str,
        now: datetime,
    ) -> Optional[DeviceSession]:
        self._check()
        current = self.sessions.get(email)
        if current is None or str(current.device_id) != device_id or current.token != expected_token:
            return None
        self.sessions[email] = replace(
            current, device_id=DeviceIdentifier(device_id), token=new_token, established_at=now
        )
        return self.sessions[email]


def store_failure() -> AccountStoreError:
    return AccountStoreError("Account store failure during test")

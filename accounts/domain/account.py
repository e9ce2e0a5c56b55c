"""
Account domain entity.

An account holds one license term: a total duration and the instant of
first login. It contains business logic and is independent of the ORM.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

from django.contrib.auth.hashers import check_password, make_password

from accounts.domain.license_clock import MAX_DURATION_SECONDS, LicenseClock
from core.domain.value_objects import Email


@dataclass(frozen=True)
class Account:
    """
    Account domain entity.

    ``activated_at`` is set exactly once, on the first successful login,
    and never changes afterwards. ``duration_seconds`` may be extended by
    an administrator at any time without touching ``activated_at``.
    """

    email: Email
    password_hash: str
    duration_seconds: int
    activated_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate account entity."""
        if not self.password_hash:
            raise ValueError("Password hash is required")
        if self.duration_seconds < 0:
            raise ValueError("License duration cannot be negative")
        if self.duration_seconds > MAX_DURATION_SECONDS:
            raise ValueError("License duration exceeds the maximum")

    @classmethod
    def create(
        cls,
        email: str,
        raw_password: str,
        duration_seconds: int,
        now: datetime,
    ) -> "Account":
        """
        Create a new, never-activated Account.

        Args:
            email: Account email (the account identifier)
            raw_password: Plain password, stored hashed
            duration_seconds: Total license duration
            now: Creation time

        Returns:
            Account entity instance
        """
        if not raw_password:
            raise ValueError("Password is required")
        return cls(
            email=Email(email),
            password_hash=make_password(raw_password),
            duration_seconds=duration_seconds,
            activated_at=None,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_activated(self) -> bool:
        return self.activated_at is not None

    def check_password(self, raw_password: str) -> bool:
        """Verify a plain password against the stored hash."""
        return bool(raw_password) and check_password(raw_password, self.password_hash)

    def activate(self, now: datetime) -> "Account":
        """
        Return an activated copy. Idempotent: an already-activated
        account is returned unchanged.
        """
        if self.activated_at is not None:
            return self
        return replace(self, activated_at=now, updated_at=now)

    def extend(self, extra_seconds: int, now: datetime) -> "Account":
        """
        Return a copy with ``extra_seconds`` added to the duration.

        Raises:
            ValueError: If the change is zero or leaves the duration out of range
        """
        if extra_seconds == 0:
            raise ValueError("Duration change must be non-zero")
        new_duration = self.duration_seconds + extra_seconds
        if new_duration < 0:
            raise ValueError("License duration cannot be negative")
        if new_duration > MAX_DURATION_SECONDS:
            raise ValueError("License duration exceeds the maximum")
        return replace(self, duration_seconds=new_duration, updated_at=now)

    def remaining_seconds(self, now: datetime) -> Optional[int]:
        """Remaining seconds, or None while the account was never activated."""
        if self.activated_at is None:
            return None
        return LicenseClock.remaining(self.duration_seconds, self.activated_at, now)

    def license_expires_at(self) -> Optional[datetime]:
        """Instant at which remaining time reaches zero."""
        if self.activated_at is None:
            return None
        return self.activated_at + timedelta(seconds=self.duration_seconds)

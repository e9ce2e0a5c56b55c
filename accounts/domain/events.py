"""
Account domain events.
"""

from datetime import datetime
from typing import Optional

from core.domain.events import DomainEvent


class AccountCreated(DomainEvent):
    """Event raised when an administrator creates an account."""

    def __init__(self, email: str, duration_seconds: int, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=email, occurred_at=occurred_at)
        self.email = email
        self.duration_seconds = duration_seconds

    def payload(self):
        return {"email": self.email, "duration_seconds": self.duration_seconds}


class AccountActivated(DomainEvent):
    """Event raised on the first successful login of an account."""

    def __init__(self, email: str, activated_at: datetime):
        super().__init__(aggregate_id=email, occurred_at=activated_at)
        self.email = email
        self.activated_at = activated_at

    def payload(self):
        return {"email": self.email, "activated_at": self.activated_at.isoformat()}


class LicenseExtended(DomainEvent):
    """Event raised when an account's total duration changes."""

    def __init__(
        self,
        email: str,
        extra_seconds: int,
        new_duration_seconds: int,
        occurred_at: Optional[datetime] = None,
    ):
        super().__init__(aggregate_id=email, occurred_at=occurred_at)
        self.email = email
        self.extra_seconds = extra_seconds
        self.new_duration_seconds = new_duration_seconds

    def payload(self):
        return {
            "email": self.email,
            "extra_seconds": self.extra_seconds,
            "new_duration_seconds": self.new_duration_seconds,
        }


class AccountDeleted(DomainEvent):
    """Event raised when an administrator deletes an account."""

    def __init__(self, email: str, occurred_at: Optional[datetime] = None):
        super().__init__(aggregate_id=email, occurred_at=occurred_at)
        self.email = email

    def payload(self):
        return {"email": self.email}

"""
Session domain events.
"""

from datetime import datetime

from core.domain.events import DomainEvent


class SessionEstablished(DomainEvent):
    """Event raised when a device logs in and becomes the account's session."""

    def __init__(self, email: str, device_id: str, established_at: datetime):
        super().__init__(aggregate_id=email, occurred_at=established_at)
        self.email = email
        self.device_id = device_id

    def payload(self):
        return {"email": self.email, "device_id": self.device_id}


class SessionSuperseded(DomainEvent):
    """Event raised when a login displaces the session of another device."""

    def __init__(
        self,
        email: str,
        previous_device_id: str,
        new_device_id: str,
        superseded_at: datetime,
    ):
        super().__init__(aggregate_id=email, occurred_at=superseded_at)
        self.email = email
        self.previous_device_id = previous_device_id
        self.new_device_id = new_device_id

    def payload(self):
        return {
            "email": self.email,
            "previous_device_id": self.previous_device_id,
            "new_device_id": self.new_device_id,
        }

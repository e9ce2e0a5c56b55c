"""
DeviceSession domain entity.

At most one session exists per account. It names the single device
allowed to use the account and the single token that device holds.
"""

import secrets
from dataclasses import dataclass
from datetime import datetime

from core.domain.value_objects import DeviceIdentifier, Email


@dataclass(frozen=True)
class DeviceSession:
    """
    DeviceSession domain entity.

    This is an immutable value object; establishing a new session
    replaces the stored one rather than mutating it.
    """

    email: Email
    device_id: DeviceIdentifier
    token: str
    established_at: datetime

    def __post_init__(self):
        """Validate session entity."""
        if not self.token:
            raise ValueError("Session token is required")

    @classmethod
    def create(cls, email: str, device_id: str, token: str, now: datetime) -> "DeviceSession":
        """
        Create a new DeviceSession entity.

        Args:
            email: Account email
            device_id: Client-supplied device identifier
            token: Bearer token issued to the device
            now: Establishment time

        Returns:
            DeviceSession entity instance
        """
        return cls(
            email=Email(email),
            device_id=DeviceIdentifier(device_id),
            token=token,
            established_at=now,
        )

    def matches(self, device_id: str, token: str) -> bool:
        """True only if both the device and the token equal this session's."""
        same_device = secrets.compare_digest(
            str(self.device_id).encode(), (device_id or "").encode()
        )
        same_token = secrets.compare_digest(self.token.encode(), (token or "").encode())
        return same_device and same_token

    def is_same_device(self, device_id: str) -> bool:
        return str(self.device_id) == device_id

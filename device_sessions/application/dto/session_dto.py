"""
Session DTOs for API responses.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SessionTokenDTO:
    """DTO for login and refresh responses."""

    token: str
    email: str
    device_id: str
    remaining_seconds: int
    expires_at: datetime


@dataclass
class SessionStatusDTO:
    """DTO for check responses."""

    email: str
    device_id: str
    remaining_seconds: int
    license_expires_at: Optional[datetime]


@dataclass
class SessionValidityDTO:
    """DTO for the diagnostic session validation."""

    valid: bool

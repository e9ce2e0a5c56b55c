"""
Account DTOs for API responses.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AccountDTO:
    """DTO for account information."""

    email: str
    duration_seconds: int
    activated_at: Optional[datetime]
    remaining_seconds: Optional[int]
    license_expires_at: Optional[datetime]
    created_at: datetime


@dataclass
class CreateAccountResponseDTO:
    """DTO for create account response."""

    email: str
    duration_seconds: int
    message: str


@dataclass
class ExtendLicenseResponseDTO:
    """DTO for extend license response."""

    email: str
    duration_seconds: int
    remaining_seconds: Optional[int]
    message: str

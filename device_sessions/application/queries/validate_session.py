"""
ValidateSessionQuery.

Diagnostic query answering whether a token is the account's live session
on a device.
"""

from dataclasses import dataclass


@dataclass
class ValidateSessionQuery:
    """Query to test an (email, device, token) triple."""

    email: str
    device_id: str
    token: str

"""
CheckSessionQuery.
"""

from dataclasses import dataclass


@dataclass
class CheckSessionQuery:
    """Query for the identity and remaining time behind a token."""

    token: str
    device_id: str

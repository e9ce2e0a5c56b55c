"""
RefreshSessionCommand.
"""

from dataclasses import dataclass


@dataclass
class RefreshSessionCommand:
    """Command to trade a live token for a fresh one on the same device."""

    token: str
    device_id: str

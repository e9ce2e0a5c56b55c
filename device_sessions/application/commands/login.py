"""
LoginCommand.

Command to authenticate an account on a device.
"""

from dataclasses import dataclass


@dataclass
class LoginCommand:
    """Command to log in and take over the account's session."""

    email: str
    password: str
    device_id: str

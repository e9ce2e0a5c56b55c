"""
CreateAccountCommand.

Command to provision a new account with a license duration.
"""

from dataclasses import dataclass


@dataclass
class CreateAccountCommand:
    """Command to create an account."""

    email: str
    password: str
    duration_seconds: int

"""
DeleteAccountCommand.
"""

from dataclasses import dataclass


@dataclass
class DeleteAccountCommand:
    """Command to delete an account and its session."""

    email: str

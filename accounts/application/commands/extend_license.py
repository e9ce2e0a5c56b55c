"""
ExtendLicenseCommand.

Command to change an account's total license duration. The
activation timestamp is never touched.
"""

from dataclasses import dataclass


@dataclass
class ExtendLicenseCommand:
    """Command to add (or, when negative, remove) license seconds."""

    email: str
    extra_seconds: int

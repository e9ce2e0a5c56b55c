"""
ListAccountsQuery.
"""

from dataclasses import dataclass


@dataclass
class ListAccountsQuery:
    """Query to list every account with its remaining license time."""

    pass

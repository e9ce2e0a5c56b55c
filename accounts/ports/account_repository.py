"""
Account repository port (interface).

This defines the contract for account persistence operations.
Implementations are in the infrastructure layer.

Every method either returns a value, returns None for a missing
account, or raises ``AccountStoreError`` when the store itself fails.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple

from accounts.domain.account import Account


class AccountRepository(ABC):
    """
    Abstract repository for Account entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def add(self, account: Account) -> Account:
        """
        Insert a new account.

        Raises:
            AccountAlreadyExistsError: If the email is taken
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by email.

        Returns:
            Account entity or None if not found
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Account]:
        """Return every account, oldest first."""
        pass

    @abstractmethod
    async def delete(self, email: str) -> bool:
        """
        Delete an account and its session.

        Returns:
            True if an account was deleted
        """
        pass

    @abstractmethod
    async def set_activation_time_if_unset(
        self, email: str, now: datetime
    ) -> Tuple[Optional[Account], bool]:
        """
        Atomically set ``activated_at`` to ``now`` only while it is null.

        Concurrent callers all observe the single winning timestamp.

        Returns:
            Tuple of (account as stored afterwards or None if missing,
            whether this call performed the activation)
        """
        pass

    @abstractmethod
    async def extend_duration(
        self, email: str, extra_seconds: int, now: datetime
    ) -> Optional[Account]:
        """
        Atomically add ``extra_seconds`` to the duration.

        Returns:
            Updated account or None if not found

        Raises:
            InvalidDurationError: If the result would be negative
        """
        pass

    @abstractmethod
    async def exists(self, email: str) -> bool:
        """Check if an account exists."""
        pass

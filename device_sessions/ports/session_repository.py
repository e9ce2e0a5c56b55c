"""
Session repository port (interface).

This defines the contract for session persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Tuple

from device_sessions.domain.session import DeviceSession


class SessionRepository(ABC):
    """
    Abstract repository for DeviceSession entities, keyed by account.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_by_account(self, email: str) -> Optional[DeviceSession]:
        """
        Find the current session of an account.

        Returns:
            DeviceSession entity or None if the account has none
        """
        pass

    @abstractmethod
    async def establish(
        self, session: DeviceSession
    ) -> Tuple[DeviceSession, Optional[DeviceSession]]:
        """
        Upsert the account's session as one atomic write.

        Whatever was stored before, for any device, is replaced. Racing
        callers resolve to whichever write the store orders last.

        Returns:
            Tuple of (stored session, session it replaced or None)
        """
        pass

    @abstractmethod
    async def replace_token(
        self,
        email: str,
        device_id: str,
        expected_token: str,
        new_token: str,
        now: datetime,
    ) -> Optional[DeviceSession]:
        """
        Replace the token only while the stored device and token still
        equal ``device_id`` and ``expected_token``.

        Returns:
            Updated session, or None when the condition no longer holds
        """
        pass

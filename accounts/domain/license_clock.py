"""
License clock.

Remaining license time is derived on demand from the activation
timestamp and the total duration. Nothing here is cached.
"""

from datetime import datetime
from typing import Callable, Optional

from django.utils import timezone

Clock = Callable[[], datetime]

# Upper bound on a license term; keeps every derived instant representable.
MAX_DURATION_SECONDS = 100 * 365 * 24 * 60 * 60


def system_clock() -> datetime:
    """Current aware UTC time."""
    return timezone.now()


class LicenseClock:
    """Pure remaining-time computation."""

    @staticmethod
    def remaining(
        total_duration_seconds: int,
        activated_at: Optional[datetime],
        now: datetime,
    ) -> int:
        """
        Compute remaining license seconds.

        Args:
            total_duration_seconds: Total license duration
            activated_at: Activation timestamp; must already be set
            now: Observation time

        Returns:
            Whole seconds remaining, floored at 0

        Raises:
            ValueError: If the license has not been activated yet
        """
        if activated_at is None:
            raise ValueError("License has not been activated")
        # Skew between hosts can put activated_at slightly after now.
        elapsed = max(0.0, (now - activated_at).total_seconds())
        return int(max(0.0, total_duration_seconds - elapsed))

    @staticmethod
    def is_expired(
        total_duration_seconds: int,
        activated_at: Optional[datetime],
        now: datetime,
    ) -> bool:
        """Return True when no license time remains."""
        return LicenseClock.remaining(total_duration_seconds, activated_at, now) <= 0

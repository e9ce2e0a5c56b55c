"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass

MAX_DEVICE_ID_LENGTH = 500


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation. Identifies an account."""

    value: str

    def __post_init__(self):
        """Validate email format."""
        if not self.value or "@" not in self.value:
            raise ValueError(f"Invalid email address: {self.value}")

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


@dataclass(frozen=True)
class DeviceIdentifier(ValueObject):
    """
    Client-supplied device identifier.

    Devices are not independently authenticated; the identifier only
    has meaning together with the session stored for the account.
    """

    value: str

    def __post_init__(self):
        """Validate device identifier."""
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Device identifier cannot be empty")
        if len(self.value) > MAX_DEVICE_ID_LENGTH:
            raise ValueError("Device identifier too long")

    def __str__(self) -> str:
        """Return identifier as string."""
        return self.value

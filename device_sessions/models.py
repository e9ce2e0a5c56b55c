"""
Model registration for the device_sessions app.

Django discovers models through ``<app>.models``; the ORM model itself
lives in the infrastructure layer.
"""

from device_sessions.infrastructure.models import DeviceSession  # noqa: F401

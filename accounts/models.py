"""
Model registration for the accounts app.

Django discovers models through ``<app>.models``; the ORM model itself
lives in the infrastructure layer.
"""

from accounts.infrastructure.models import Account  # noqa: F401

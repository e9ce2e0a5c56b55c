"""
DeviceSession Django ORM model.

This is the infrastructure layer model for sessions.
Domain entities are in device_sessions.domain.session.
"""

from django.db import models


class DeviceSession(models.Model):
    """
    The single live (device, token) pair of an account.

    Keyed by the account so there can never be two rows for one account;
    removed together with the account.
    """

    account = models.OneToOneField(
        "accounts.Account",
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="device_session",
    )
    device_id = models.CharField(max_length=500, help_text="Client-supplied device identifier")
    token = models.TextField()
    established_at = models.DateTimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "device_sessions"
        ordering = ["-established_at"]

    def clean(self):
        """Validate session fields."""
        from django.core.exceptions import ValidationError

        if not self.device_id or len(self.device_id.strip()) == 0:
            raise ValidationError("Device identifier cannot be empty")

    def __str__(self):
        return f"{self.account_id} @ {self.device_id}"

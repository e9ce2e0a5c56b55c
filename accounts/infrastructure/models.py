"""
Account Django ORM model.

This is the infrastructure layer model for accounts.
Domain entities are in accounts.domain.account.
"""

from django.db import models

from accounts.domain.license_clock import MAX_DURATION_SECONDS


class Account(models.Model):
    """
    A registered account holding a single license term.
    """

    email = models.EmailField(primary_key=True, max_length=254)
    password_hash = models.CharField(max_length=256)
    duration_seconds = models.BigIntegerField(
        default=0, help_text="Total license duration in seconds"
    )
    activated_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="First successful login; set once, never changed",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "accounts"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(duration_seconds__gte=0),
                name="accounts_duration_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(duration_seconds__lte=MAX_DURATION_SECONDS),
                name="accounts_duration_bounded",
            ),
        ]

    def __str__(self):
        return self.email

"""
Django admin configuration for accounts app.
"""

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from accounts.domain.license_clock import LicenseClock
from accounts.infrastructure.models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """Admin interface for Account model."""

    list_display = [
        "email",
        "duration_seconds",
        "activated_at",
        "remaining_display",
        "created_at",
    ]
    list_filter = ["activated_at", "created_at"]
    search_fields = ["email"]
    readonly_fields = ["password_hash", "activated_at", "created_at", "updated_at"]
    fieldsets = (
        (
            "Account",
            {
                "fields": ("email", "password_hash"),
            },
        ),
        (
            "License",
            {
                "fields": ("duration_seconds", "activated_at"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def remaining_display(self, obj):
        """Display remaining license time with color."""
        if obj.activated_at is None:
            return format_html('<span style="color: gray;">Not activated</span>')
        remaining = LicenseClock.remaining(obj.duration_seconds, obj.activated_at, timezone.now())
        if remaining <= 0:
            return format_html('<span style="color: red; font-weight: bold;">Expired</span>')
        return format_html('<span style="color: green;">{}s</span>', remaining)

    remaining_display.short_description = "Remaining"

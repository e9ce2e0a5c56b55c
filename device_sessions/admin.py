"""
Django admin configuration for device_sessions app.
"""

from django.contrib import admin
from django.utils.html import format_html

from device_sessions.infrastructure.models import DeviceSession


@admin.register(DeviceSession)
class DeviceSessionAdmin(admin.ModelAdmin):
    """Admin interface for DeviceSession model. Sessions are read-only here."""

    list_display = ["account", "device_id_display", "established_at", "updated_at"]
    list_filter = ["established_at"]
    search_fields = ["account__email", "device_id"]
    readonly_fields = ["account", "device_id", "token", "established_at", "updated_at"]

    def device_id_display(self, obj):
        """Display device identifier with truncation."""
        if len(obj.device_id) > 50:
            return format_html(
                '<span title="{}">{}</span>',
                obj.device_id,
                obj.device_id[:47] + "...",
            )
        return obj.device_id

    device_id_display.short_description = "Device"

    def has_add_permission(self, request):
        return False

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("account")

"""
App configuration for Device License Service.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)

# Management commands that never serve traffic.
SKIP_SETUP_COMMANDS = {"migrate", "makemigrations", "collectstatic", "check"}


class DeviceLicenseServiceConfig(AppConfig):
    """App configuration for DeviceLicenseService."""

    name = "DeviceLicenseService"
    verbose_name = "Device License Service"

    def ready(self):
        """Register event handlers and set up observability once Django is loaded."""
        from core.infrastructure.event_handlers import register_event_handlers

        register_event_handlers()

        if len(sys.argv) > 1 and sys.argv[1] in SKIP_SETUP_COMMANDS:
            return
        # Django's autoreloader imports the project twice; only the child serves.
        if os.environ.get("RUN_MAIN") == "false":
            return

        from core.instrumentation import setup_opentelemetry

        logger.info("Setting up observability...")
        setup_opentelemetry()

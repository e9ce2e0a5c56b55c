"""
Development settings for DeviceLicenseService.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Override with environment variable DB_ENGINE=sqlite for SQLite
if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# A fixed key keeps the admin API usable locally without extra setup.
ADMIN_KEY = os.environ.get("ADMIN_KEY", "dev-admin-key")

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

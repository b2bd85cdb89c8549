"""
PATH: backend/settings/test.py

TEST SETTINGS

- In-memory SQLite
- Geocoding never calls out (tests patch the HTTP layer explicitly)
- Fast password hashing
- Throttling off
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import REST_FRAMEWORK

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

GEOCODING = {
    "ENABLED": False,
    "API_KEY": "test-key",
    "BASE_URL": "https://maps.googleapis.com/maps/api/geocode/json",
    "TIMEOUT_SECONDS": 5,
    "GEOHASH_PRECISION": 9,
}

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_CLASSES": (),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "root": {"handlers": [], "level": "CRITICAL"},
}

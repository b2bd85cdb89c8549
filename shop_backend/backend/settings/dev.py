"""
PATH: backend/settings/dev.py

LOCAL DEVELOPMENT SETTINGS

- Vite dev server on :9002 is the trusted frontend origin
- Geocoding only calls out when an API key is configured
- Domain loggers at DEBUG
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import GEOCODING, LOGGING, env

DEBUG = True

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])

CORS_ALLOWED_ORIGINS = env.list(
    "CORS_ALLOWED_ORIGINS", default=["http://localhost:9002"]
)

CSRF_TRUSTED_ORIGINS = env.list(
    "CSRF_TRUSTED_ORIGINS", default=["http://localhost:9002"]
)

CORS_ALLOW_CREDENTIALS = True

GEOCODING = {
    **GEOCODING,
    "ENABLED": GEOCODING["ENABLED"] and bool(GEOCODING["API_KEY"]),
}

LOGGING = {
    **LOGGING,
    "loggers": {
        **LOGGING["loggers"],
        "shops": {"level": "DEBUG"},
        "geocoding": {"level": "DEBUG"},
        "equipment": {"level": "DEBUG"},
        "work_orders": {"level": "DEBUG"},
    },
}

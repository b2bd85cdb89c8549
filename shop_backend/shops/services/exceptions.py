# shops/services/exceptions.py

"""
SHOP SERVICE ERRORS

Centralized domain errors for shop services.
"""


class ShopServiceError(Exception):
    """Base exception for all shop service failures."""


class ShopNotFoundError(ShopServiceError):
    """Raised when the acting user has no shop."""


class AlreadyOnboardedError(ShopServiceError):
    """Raised when onboarding is re-run for a completed shop."""


class GeocodingError(ShopServiceError):
    """Raised when an address cannot be turned into coordinates."""

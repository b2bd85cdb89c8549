# equipment/services/exceptions.py

"""
EQUIPMENT SERVICE ERRORS

Centralized domain errors for equipment services.
"""


class EquipmentServiceError(Exception):
    """Base exception for all equipment service failures."""


class EquipmentNotFoundError(EquipmentServiceError):
    """Raised when equipment does not exist or is not visible to the caller."""


class ComponentNotFoundError(EquipmentServiceError):
    """Raised when a user component does not exist on the equipment."""


class CatalogEntryNotFoundError(EquipmentServiceError):
    """Raised when a referenced master component does not exist."""


class ReplacementError(EquipmentServiceError):
    """Raised when a component replacement command is invalid."""


class InvalidFitDataError(EquipmentServiceError):
    """Raised when bike fit data cannot be stored."""

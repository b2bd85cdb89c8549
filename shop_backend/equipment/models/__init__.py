"""
PATH: equipment/models/__init__.py

Equipment models export surface.
"""

from .component import MasterComponent, UserComponent
from .equipment import (
    BASE_SYSTEMS,
    EBIKE_SYSTEM,
    EBIKE_TYPES,
    TYPE_CYCLING_SHOES,
    TYPE_WHEELSET,
    Equipment,
)
from .maintenance_log import MaintenanceLog

__all__ = [
    "Equipment",
    "MasterComponent",
    "UserComponent",
    "MaintenanceLog",
    "BASE_SYSTEMS",
    "EBIKE_SYSTEM",
    "EBIKE_TYPES",
    "TYPE_CYCLING_SHOES",
    "TYPE_WHEELSET",
]

# equipment/views/__init__.py

"""
Equipment views package exports.
"""

from .catalog import MasterComponentViewSet
from .equipment import EquipmentViewSet

__all__ = [
    "EquipmentViewSet",
    "MasterComponentViewSet",
]

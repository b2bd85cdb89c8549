from .component import (
    CatalogOptionsQuerySerializer,
    CatalogOptionsSerializer,
    ComponentReplaceSerializer,
    ComponentWithChildrenSerializer,
    MasterComponentSerializer,
    ResolvedComponentSerializer,
    SystemComponentsSerializer,
)
from .detail import EquipmentDetailSerializer
from .equipment import (
    BikeFitSerializer,
    EquipmentSerializer,
    EquipmentSummarySerializer,
    EquipmentUpdateSerializer,
    WheelsetCreateSerializer,
)
from .maintenance_log import MaintenanceLogCreateSerializer, MaintenanceLogSerializer

__all__ = [
    "EquipmentSerializer",
    "EquipmentSummarySerializer",
    "EquipmentUpdateSerializer",
    "EquipmentDetailSerializer",
    "WheelsetCreateSerializer",
    "BikeFitSerializer",
    "MasterComponentSerializer",
    "ResolvedComponentSerializer",
    "ComponentWithChildrenSerializer",
    "SystemComponentsSerializer",
    "ComponentReplaceSerializer",
    "CatalogOptionsQuerySerializer",
    "CatalogOptionsSerializer",
    "MaintenanceLogSerializer",
    "MaintenanceLogCreateSerializer",
]

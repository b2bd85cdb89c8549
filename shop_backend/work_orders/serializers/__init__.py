from .work_order import (
    CustomerWorkOrderSerializer,
    LinkedEquipmentSerializer,
    ServiceRequestSerializer,
    WorkOrderCreateSerializer,
    WorkOrderDetailSerializer,
    WorkOrderNotesSerializer,
    WorkOrderSerializer,
    WorkOrderStatusSerializer,
)

__all__ = [
    "WorkOrderSerializer",
    "WorkOrderDetailSerializer",
    "WorkOrderCreateSerializer",
    "WorkOrderNotesSerializer",
    "WorkOrderStatusSerializer",
    "LinkedEquipmentSerializer",
    "ServiceRequestSerializer",
    "CustomerWorkOrderSerializer",
]

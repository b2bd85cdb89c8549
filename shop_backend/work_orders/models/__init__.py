from .work_order import STATUS_SEQUENCE, WorkOrder

__all__ = ["WorkOrder", "STATUS_SEQUENCE"]

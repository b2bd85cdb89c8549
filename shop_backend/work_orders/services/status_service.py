# work_orders/services/status_service.py

"""
WORK ORDER STATUS

- Any status in STATUS_SEQUENCE may be set at any time (no forward-only rule).
- Stored values outside the sequence (legacy "pending", typos) read as "New".
"""

from __future__ import annotations

import logging

from django.db.models import Q

from work_orders.models import STATUS_SEQUENCE, WorkOrder
from work_orders.services.exceptions import InvalidStatusError

logger = logging.getLogger(__name__)

LEGACY_STATUS_MAP = {
    "pending": WorkOrder.Status.NEW,
}


def normalize_status(value) -> str:
    if value in STATUS_SEQUENCE:
        return value
    key = str(value or "").strip().lower()
    return LEGACY_STATUS_MAP.get(key, WorkOrder.Status.NEW)


def status_index(value) -> int:
    return STATUS_SEQUENCE.index(normalize_status(value))


def update_status(*, work_order: WorkOrder, status: str) -> WorkOrder:
    if status not in STATUS_SEQUENCE:
        raise InvalidStatusError(f"Invalid status: {status}")

    previous = work_order.status
    work_order.status = status
    work_order.save(update_fields=["status", "updated_at"])

    logger.info(
        "Work order status changed",
        extra={
            "work_order_id": str(work_order.id),
            "from_status": previous,
            "to_status": status,
        },
    )
    return work_order


def stored_status_q(status: str) -> Q:
    """
    Rows whose *reported* status is `status`.

    "New" also matches every stored value outside the sequence, since those
    normalize to "New".
    """
    if status == WorkOrder.Status.NEW:
        return Q(status=status) | ~Q(status__in=STATUS_SEQUENCE)
    return Q(status=status)

# work_orders/services/priority_service.py

"""
PRIORITY ASSESSMENT

Deterministic keyword triage over the issue text (service type + notes):
- safety-critical parts      -> High
- drivetrain / shifting      -> Medium
- everything else            -> Low
Completed orders are always Low.
"""

from __future__ import annotations

import re

from work_orders.models import WorkOrder

HIGH_KEYWORDS = ("brake", "crack", "frame", "fork", "headset", "steering")
MEDIUM_KEYWORDS = (
    "drivetrain",
    "shift",
    "derailleur",
    "chain",
    "cassette",
    "gear",
    "crank",
    "bottom bracket",
)


def _matches(text: str, keywords) -> bool:
    return any(re.search(r"\b" + re.escape(word), text) for word in keywords)


def assess_priority(*, issue: str, status: str | None = None) -> str:
    if status == WorkOrder.Status.COMPLETED:
        return WorkOrder.Priority.LOW

    text = (issue or "").lower()
    if _matches(text, HIGH_KEYWORDS):
        return WorkOrder.Priority.HIGH
    if _matches(text, MEDIUM_KEYWORDS):
        return WorkOrder.Priority.MEDIUM
    return WorkOrder.Priority.LOW


def assess_and_save_priority(*, work_order: WorkOrder) -> WorkOrder:
    issue = " ".join(p for p in (work_order.service_type, work_order.notes) if p)
    work_order.priority = assess_priority(issue=issue, status=work_order.status)
    work_order.save(update_fields=["priority", "updated_at"])
    return work_order

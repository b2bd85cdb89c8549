# shops/services/overview_service.py

"""
SHOP OVERVIEW (dashboard header cards)

- open work orders: status != Completed
- completed this month: Completed orders last updated this calendar month
- team members: employee count
- revenue month-to-date: sum of maintenance log costs recorded by this shop
  this calendar month
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from django.db.models import Sum
from django.utils import timezone

from employees.models import Employee
from equipment.models import MaintenanceLog
from work_orders.models import WorkOrder


@dataclass(frozen=True)
class ShopOverview:
    open_work_orders: int
    completed_this_month: int
    team_members: int
    revenue_mtd: Decimal


def month_start(today: date | None = None) -> date:
    today = today or timezone.localdate()
    return today.replace(day=1)


def next_month_start(start: date) -> date:
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def get_shop_overview(*, shop, today: date | None = None) -> ShopOverview:
    start = month_start(today)
    end = next_month_start(start)
    orders = WorkOrder.objects.filter(shop=shop)

    revenue = (
        MaintenanceLog.objects.filter(shop=shop, date__gte=start, date__lt=end)
        .aggregate(total=Sum("cost"))["total"]
    )

    return ShopOverview(
        open_work_orders=orders.exclude(status=WorkOrder.Status.COMPLETED).count(),
        completed_this_month=orders.filter(
            status=WorkOrder.Status.COMPLETED,
            updated_at__date__gte=start,
            updated_at__date__lt=end,
        ).count(),
        team_members=Employee.objects.filter(shop=shop).count(),
        revenue_mtd=(revenue or Decimal("0.00")).quantize(Decimal("0.01")),
    )

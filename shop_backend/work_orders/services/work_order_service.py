# work_orders/services/work_order_service.py

"""
WORK ORDER SERVICE

Purpose:
- Create shop work orders with customer + equipment snapshots.
- Accept service requests raised by riders for their own equipment.
- Provide the canonical shop list ordering (open orders first, newest first).

A shop may only link a customer it already serves (has a work order with).
The first link always comes from the rider, through a service request.
"""

from __future__ import annotations

import logging

from django.db.models import Case, IntegerField, QuerySet, Value, When

from shops.models import Shop
from work_orders.models import WorkOrder
from work_orders.services.exceptions import (
    CustomerNotServedError,
    InvalidWorkOrderError,
    ShopUnavailableError,
)
from work_orders.services.status_service import normalize_status

logger = logging.getLogger(__name__)


def shop_work_orders(shop) -> QuerySet:
    return (
        WorkOrder.objects.filter(shop=shop)
        .select_related("equipment")
        .annotate(
            completed_rank=Case(
                When(status=WorkOrder.Status.COMPLETED, then=Value(1)),
                default=Value(0),
                output_field=IntegerField(),
            )
        )
        .order_by("completed_rank", "-created_at")
    )


def serves_customer(shop, customer) -> bool:
    return WorkOrder.objects.filter(shop=shop, customer=customer).exists()


def create_work_order(
    *,
    shop,
    customer=None,
    equipment=None,
    customer_name: str = "",
    customer_email: str = "",
    customer_phone: str = "",
    service_type: str = "",
    notes: str = "",
    internal_notes: str = "",
    status: str | None = None,
    customer_initiated: bool = False,
) -> WorkOrder:
    if equipment is not None:
        if customer is None:
            customer = equipment.owner
        elif equipment.owner_id != customer.id:
            raise InvalidWorkOrderError("Equipment does not belong to this customer")

    if customer is not None and not customer_initiated and not serves_customer(shop, customer):
        raise CustomerNotServedError("Customer not found")

    if customer is not None:
        customer_name = customer_name or customer.full_name
        customer_email = customer_email or customer.email
        customer_phone = customer_phone or customer.phone

    work_order = WorkOrder.objects.create(
        shop=shop,
        customer=customer,
        customer_name=customer_name or "",
        customer_email=customer_email or "",
        customer_phone=customer_phone or "",
        equipment=equipment,
        equipment_name=equipment.name if equipment is not None else "",
        equipment_brand=equipment.brand if equipment is not None else "",
        equipment_model=equipment.model if equipment is not None else "",
        service_type=(service_type or "").strip(),
        notes=notes or "",
        internal_notes=internal_notes or "",
        status=normalize_status(status) if status else WorkOrder.Status.NEW,
    )

    logger.info(
        "Work order created",
        extra={"work_order_id": str(work_order.id), "shop_id": str(shop.id)},
    )
    return work_order


def request_service(
    *,
    customer,
    shop_id,
    equipment=None,
    service_type: str = "",
    notes: str = "",
) -> WorkOrder:
    """
    A rider asks a shop to service their equipment.

    This is what lets the shop see the rider's equipment from then on.
    """
    shop = Shop.objects.filter(id=shop_id, is_active=True, onboarding_complete=True).first()
    if shop is None:
        raise ShopUnavailableError("Shop not found")

    if equipment is not None and equipment.owner_id != customer.id:
        raise InvalidWorkOrderError("Equipment does not belong to this customer")

    work_order = create_work_order(
        shop=shop,
        customer=customer,
        equipment=equipment,
        service_type=service_type,
        notes=notes,
        customer_initiated=True,
    )

    logger.info(
        "Service requested",
        extra={
            "work_order_id": str(work_order.id),
            "shop_id": str(shop.id),
            "customer_id": str(customer.id),
        },
    )
    return work_order

# equipment/services/access.py

"""
EQUIPMENT VISIBILITY

A rider always sees their own equipment.
Shop-side users see a rider's equipment only while their shop has at least one
work order for that rider. Riders open that link themselves by requesting
service; a shop cannot create it on its own.
"""

from __future__ import annotations

from django.db.models import QuerySet

from equipment.models import Equipment
from equipment.services.exceptions import EquipmentNotFoundError
from shops.tenancy import shop_for_user
from work_orders.models import WorkOrder
from work_orders.services.work_order_service import serves_customer


def shop_serves_customer(shop, customer) -> bool:
    if shop is None or customer is None:
        return False
    return serves_customer(shop, customer)


def visible_equipment(user) -> QuerySet:
    """
    Every piece of equipment `user` may read.
    """
    if not user or not user.is_authenticated:
        return Equipment.objects.none()

    if user.is_superuser:
        return Equipment.objects.all()

    shop = shop_for_user(user)
    if shop is None:
        return Equipment.objects.filter(owner=user)

    customer_ids = (
        WorkOrder.objects.filter(shop=shop, customer__isnull=False)
        .values_list("customer_id", flat=True)
    )
    return Equipment.objects.filter(owner_id__in=customer_ids) | Equipment.objects.filter(owner=user)


def can_access_equipment(user, equipment: Equipment) -> bool:
    if not user or not user.is_authenticated:
        return False
    if user.is_superuser or equipment.owner_id == user.id:
        return True
    return shop_serves_customer(shop_for_user(user), equipment.owner)


def get_equipment_for(user, equipment_id) -> Equipment:
    """
    Load equipment the caller may access, or raise EquipmentNotFoundError.

    Equipment the caller cannot see is reported as missing.
    """
    equipment = Equipment.objects.select_related("owner").filter(id=equipment_id).first()
    if equipment is None or not can_access_equipment(user, equipment):
        raise EquipmentNotFoundError("Equipment not found")
    return equipment

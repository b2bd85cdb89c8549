# equipment/services/equipment_service.py

"""
EQUIPMENT SERVICE

Purpose:
- Assemble the equipment detail view (resolved components, wear ranking,
  service history, systems, linked shoes).
- Apply descriptive updates, deletion, service log entries and wheelsets.

Writes that touch more than one row are atomic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from django.db import transaction

from equipment.models import (
    TYPE_CYCLING_SHOES,
    TYPE_WHEELSET,
    Equipment,
    MaintenanceLog,
    UserComponent,
)
from equipment.services.component_join import (
    ResolvedComponent,
    filter_by_system,
    resolve_equipment_components,
    system_title,
    top_worn,
)
from equipment.services.exceptions import EquipmentServiceError

logger = logging.getLogger("equipment")

UPDATABLE_FIELDS = {
    "name",
    "type",
    "brand",
    "model",
    "frame_size",
    "size",
    "purchase_date",
    "purchase_price",
    "total_distance",
    "total_hours",
}


@dataclass
class EquipmentDetail:
    equipment: Equipment
    components: list[ResolvedComponent]
    top_components: list[ResolvedComponent]
    maintenance_log: list[MaintenanceLog]
    systems: list[str]
    associated_shoes: list[Equipment] = field(default_factory=list)


@dataclass
class SystemComponents:
    system: str
    components: list[ResolvedComponent]


# ============================================================
# READS
# ============================================================

def associated_shoes_for(equipment: Equipment) -> list[Equipment]:
    if equipment.is_shoes:
        return []
    return list(
        equipment.associated_with.filter(type=TYPE_CYCLING_SHOES).order_by("name")
    )


def get_equipment_detail(equipment: Equipment) -> EquipmentDetail:
    components = resolve_equipment_components(equipment)
    return EquipmentDetail(
        equipment=equipment,
        components=components,
        top_components=top_worn(components, 3),
        maintenance_log=list(equipment.maintenance_log.order_by("-date", "-created_at")),
        systems=equipment.systems,
        associated_shoes=associated_shoes_for(equipment),
    )


def get_system_components(equipment: Equipment, system: str) -> SystemComponents:
    return SystemComponents(
        system=system_title(system),
        components=filter_by_system(resolve_equipment_components(equipment), system),
    )


# ============================================================
# WRITES
# ============================================================

@transaction.atomic
def update_equipment(*, equipment: Equipment, associated_equipment_ids=None, **changes) -> Equipment:
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise EquipmentServiceError(f"Unknown equipment fields: {sorted(unknown)}")

    for field_name, value in changes.items():
        setattr(equipment, field_name, value)
    if changes:
        equipment.full_clean(exclude=["owner", "associated_equipment", "fit_data"])
        equipment.save()

    if associated_equipment_ids is not None:
        linked = list(
            Equipment.objects.filter(
                owner_id=equipment.owner_id,
                id__in=associated_equipment_ids,
            ).exclude(id=equipment.id)
        )
        if len(linked) != len(set(str(i) for i in associated_equipment_ids)):
            raise EquipmentServiceError("Associated equipment must belong to the same owner")
        equipment.associated_equipment.set(linked)

    return equipment


@transaction.atomic
def delete_equipment(*, equipment: Equipment) -> None:
    equipment_id = str(equipment.id)
    UserComponent.objects.filter(equipment=equipment).delete()
    MaintenanceLog.objects.filter(equipment=equipment).delete()
    equipment.delete()
    logger.info("Equipment deleted", extra={"equipment_id": equipment_id})


def add_maintenance_log(
    *,
    equipment: Equipment,
    component_name: str,
    service_type: str,
    entry_date: date | None = None,
    notes: str = "",
    cost: Decimal | None = None,
    shop=None,
) -> MaintenanceLog:
    component_name = (component_name or "").strip()
    if not component_name:
        raise EquipmentServiceError("Component name is required")
    if service_type not in MaintenanceLog.ServiceType.values:
        raise EquipmentServiceError(f"Invalid service type: {service_type}")
    if cost is not None and cost < 0:
        raise EquipmentServiceError("Cost cannot be negative")

    return MaintenanceLog.objects.create(
        equipment=equipment,
        date=entry_date or date.today(),
        component_name=component_name,
        service_type=service_type,
        notes=notes or "",
        cost=cost,
        shop=shop,
        shop_name=shop.name if shop is not None else "",
    )


@transaction.atomic
def create_wheelset(
    *,
    parent: Equipment,
    name: str,
    brand: str = "",
    model: str = "",
    purchase_date: date | None = None,
    purchase_price: Decimal | None = None,
) -> Equipment:
    """
    Create a spare wheelset for `parent` and link it.

    The link is appended to the parent's existing associations.
    """
    name = (name or "").strip()
    if not name:
        raise EquipmentServiceError("Wheelset name is required")

    wheelset = Equipment.objects.create(
        owner_id=parent.owner_id,
        name=name,
        type=TYPE_WHEELSET,
        brand=brand or "",
        model=model or "",
        purchase_date=purchase_date,
        purchase_price=purchase_price,
        total_distance=0.0,
        total_hours=0.0,
    )
    parent.associated_equipment.add(wheelset)

    logger.info(
        "Wheelset created",
        extra={"equipment_id": str(parent.id), "wheelset_id": str(wheelset.id)},
    )
    return wheelset

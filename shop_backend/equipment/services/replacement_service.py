# equipment/services/replacement_service.py

"""
COMPONENT REPLACEMENT (DOMAIN-CONTROLLED)

FLOW (one transaction):
1) Resolve the replacement part: an existing catalog entry, or manual data
   that becomes a new catalog entry (same name + system as the old part)
2) Deactivate the old user component (kept for history)
3) Create the new user component (zero wear, bought today, same parent)
4) Move sub-components under the new component
5) Append a "replaced" maintenance log entry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from django.db import transaction
from django.utils import timezone

from equipment.models import Equipment, MaintenanceLog, MasterComponent, UserComponent
from equipment.services.exceptions import (
    CatalogEntryNotFoundError,
    ComponentNotFoundError,
    ReplacementError,
)

logger = logging.getLogger("equipment")


@dataclass(frozen=True)
class ManualPart:
    brand: str
    series: str = ""
    model: str = ""
    size: str = ""


@dataclass(frozen=True)
class ReplacementResult:
    old_component: UserComponent
    new_component: UserComponent
    master_component: MasterComponent
    message: str


def _resolve_new_master(
    *,
    old_master: MasterComponent | None,
    new_master_component_id,
    manual: ManualPart | None,
) -> MasterComponent:
    if new_master_component_id:
        master = MasterComponent.objects.filter(id=new_master_component_id).first()
        if master is None:
            raise CatalogEntryNotFoundError("Replacement part not found in catalog")
        return master

    if manual is None:
        raise ReplacementError("Provide either a catalog part or manual part details")

    if not (manual.brand or "").strip():
        raise ReplacementError("Brand is required for a manual replacement part")

    if old_master is None:
        raise ReplacementError("Cannot add a manual part: the replaced part has no catalog entry")

    return MasterComponent.objects.create(
        name=old_master.name,
        system=old_master.system,
        brand=manual.brand.strip(),
        series=(manual.series or "").strip(),
        model=(manual.model or "").strip(),
        size=(manual.size or "").strip(),
    )


@transaction.atomic
def replace_component(
    *,
    equipment: Equipment,
    user_component_id,
    reason: str,
    new_master_component_id=None,
    manual: ManualPart | None = None,
    shop=None,
) -> ReplacementResult:
    if reason not in UserComponent.ReplacementReason.values:
        raise ReplacementError(f"Invalid replacement reason: {reason}")

    old = (
        UserComponent.objects.select_for_update()
        .filter(equipment=equipment, id=user_component_id, is_active=True)
        .first()
    )
    if old is None:
        raise ComponentNotFoundError("Component not found")

    old_master = (
        MasterComponent.objects.filter(id=old.master_component_id).first()
        if old.master_component_id
        else None
    )

    master = _resolve_new_master(
        old_master=old_master,
        new_master_component_id=new_master_component_id,
        manual=manual,
    )

    old.is_active = False
    old.replaced_at = timezone.now()
    old.replacement_reason = reason
    old.save(update_fields=["is_active", "replaced_at", "replacement_reason", "updated_at"])

    new = UserComponent.objects.create(
        equipment=equipment,
        master_component_id=master.id,
        parent_id=old.parent_id,
        purchase_date=date.today(),
        wear_percentage=0.0,
        total_distance=0.0,
        total_hours=0.0,
        size=(manual.size if manual is not None else "") or "",
    )

    moved = UserComponent.objects.filter(parent=old).update(parent=new)

    component_name = master.name
    MaintenanceLog.objects.create(
        equipment=equipment,
        date=date.today(),
        component_name=component_name,
        service_type=MaintenanceLog.ServiceType.REPLACED,
        notes=f"Replaced ({reason}) with {master}",
        shop=shop,
        shop_name=shop.name if shop is not None else "",
    )

    logger.info(
        "Component replaced",
        extra={
            "equipment_id": str(equipment.id),
            "old_component_id": str(old.id),
            "new_component_id": str(new.id),
            "master_component_id": str(master.id),
            "reason": reason,
            "sub_components_moved": moved,
        },
    )

    return ReplacementResult(
        old_component=old,
        new_component=new,
        master_component=master,
        message=f"{component_name} has been replaced.",
    )


def delete_user_component(*, equipment: Equipment, user_component_id) -> None:
    deleted, _ = UserComponent.objects.filter(equipment=equipment, id=user_component_id).delete()
    if not deleted:
        raise ComponentNotFoundError("Component not found")

# equipment/services/component_join.py

"""
COMPONENT RECONCILIATION (user components x master catalog)

Purpose:
- A UserComponent only carries wear/usage state plus a soft pointer
  (master_component_id) into the shared MasterComponent catalog.
- Every read of "what is fitted to this bike" needs the two merged.

Rules:
- Catalog lookups are batched: ids are de-duplicated, falsy ids dropped, and
  fetched in chunks of at most MASTER_COMPONENT_LOOKUP_BATCH_SIZE (default 30).
- A user component whose catalog entry is missing is skipped (and logged);
  it never fails the whole read.
- User-instance fields win over catalog fields; the id is always the
  user component id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from django.conf import settings

from equipment.models import BASE_SYSTEMS, EBIKE_SYSTEM, Equipment, MasterComponent, UserComponent
from equipment.services.exceptions import ComponentNotFoundError

logger = logging.getLogger("equipment")

DEFAULT_LOOKUP_BATCH_SIZE = 30


@dataclass(frozen=True)
class ResolvedComponent:
    """A fitted part: user-instance state merged over its catalog entry."""

    id: str
    master_component_id: str
    component_name: str
    component_group: str
    brand: str
    series: str
    model: str
    size: str
    lifespan_hours: Optional[int]
    lifespan_distance: Optional[int]
    purchase_date: Optional[date]
    last_service_date: Optional[date]
    total_distance: float
    total_hours: float
    wear_percentage: float
    notes: str
    parent_user_component_id: Optional[str]


@dataclass(frozen=True)
class ComponentWithChildren:
    component: Optional[ResolvedComponent]
    sub_components: list[ResolvedComponent]


def lookup_batch_size() -> int:
    size = int(getattr(settings, "MASTER_COMPONENT_LOOKUP_BATCH_SIZE", DEFAULT_LOOKUP_BATCH_SIZE) or 0)
    return size if size > 0 else DEFAULT_LOOKUP_BATCH_SIZE


def unique_ids(ids: Iterable) -> list[str]:
    """De-duplicate (first-seen order) and drop falsy ids."""
    seen: dict[str, None] = {}
    for raw in ids:
        if not raw:
            continue
        seen.setdefault(str(raw), None)
    return list(seen)


def chunked(items: list, size: int) -> Iterable[list]:
    if size <= 0:
        raise ValueError("chunk size must be positive")
    for start in range(0, len(items), size):
        yield items[start:start + size]


def load_master_components(ids: Iterable, batch_size: int | None = None) -> dict[str, MasterComponent]:
    """
    Fetch catalog entries for the given ids, `batch_size` ids per query.
    Returns {str(id): MasterComponent}; ids with no catalog row are absent.
    """
    wanted = unique_ids(ids)
    if not wanted:
        return {}

    size = batch_size or lookup_batch_size()
    found: dict[str, MasterComponent] = {}

    for batch in chunked(wanted, size):
        for master in MasterComponent.objects.filter(id__in=batch):
            found[str(master.id)] = master

    return found


def combine_component(user_component: UserComponent, master: MasterComponent) -> ResolvedComponent:
    return ResolvedComponent(
        id=str(user_component.id),
        master_component_id=str(master.id),
        component_name=master.name,
        component_group=master.system,
        brand=master.brand,
        series=master.series,
        model=master.model,
        size=user_component.size or master.size,
        lifespan_hours=master.lifespan_hours,
        lifespan_distance=master.lifespan_distance,
        purchase_date=user_component.purchase_date,
        last_service_date=user_component.last_service_date,
        total_distance=float(user_component.total_distance or 0.0),
        total_hours=float(user_component.total_hours or 0.0),
        wear_percentage=float(user_component.wear_percentage or 0.0),
        notes=user_component.notes,
        parent_user_component_id=(
            str(user_component.parent_id) if user_component.parent_id else None
        ),
    )


def combine_components(
    user_components: Iterable[UserComponent],
    masters: dict[str, MasterComponent],
) -> list[ResolvedComponent]:
    combined = []
    for uc in user_components:
        master = masters.get(str(uc.master_component_id)) if uc.master_component_id else None
        if master is None:
            logger.warning(
                "Master component not found; skipping user component",
                extra={
                    "user_component_id": str(uc.id),
                    "master_component_id": str(uc.master_component_id or ""),
                },
            )
            continue
        combined.append(combine_component(uc, master))
    return combined


def resolve_components(user_components: Iterable[UserComponent]) -> list[ResolvedComponent]:
    user_components = list(user_components)
    masters = load_master_components(uc.master_component_id for uc in user_components)
    return combine_components(user_components, masters)


def resolve_equipment_components(equipment: Equipment) -> list[ResolvedComponent]:
    return resolve_components(
        UserComponent.objects.filter(equipment=equipment, is_active=True).order_by("created_at")
    )


def resolve_component_with_children(equipment: Equipment, user_component_id) -> ComponentWithChildren:
    """
    Main component + its sub-components, resolved with ONE batched catalog lookup.
    """
    main = UserComponent.objects.filter(equipment=equipment, id=user_component_id).first()
    if main is None:
        raise ComponentNotFoundError("Component not found")

    subs = list(
        UserComponent.objects.filter(
            equipment=equipment,
            parent=main,
            is_active=True,
        ).order_by("created_at")
    )

    masters = load_master_components(
        [main.master_component_id, *(s.master_component_id for s in subs)]
    )

    main_master = masters.get(str(main.master_component_id)) if main.master_component_id else None
    component = combine_component(main, main_master) if main_master is not None else None
    if component is None:
        logger.warning(
            "Master component not found for main component",
            extra={"user_component_id": str(main.id)},
        )

    return ComponentWithChildren(
        component=component,
        sub_components=combine_components(subs, masters),
    )


def top_worn(components: Iterable[ResolvedComponent], limit: int = 3) -> list[ResolvedComponent]:
    return sorted(components, key=lambda c: c.wear_percentage, reverse=True)[:limit]


def normalize_system_slug(system: str) -> str:
    return (system or "").replace("-", " ").strip().lower()


def system_title(system: str) -> str:
    slug = normalize_system_slug(system)
    for known in (*BASE_SYSTEMS, EBIKE_SYSTEM):
        if normalize_system_slug(known) == slug:
            return known
    return " ".join(word[:1].upper() + word[1:] for word in slug.split())


def filter_by_system(components: Iterable[ResolvedComponent], system: str) -> list[ResolvedComponent]:
    """
    Components belonging to a system page.

    "brakes" gathers every brake group (Disc Brakes, Rim Brakes, Brakes);
    other systems match the component group exactly (case-insensitive).
    """
    slug = normalize_system_slug(system)
    if not slug:
        return []

    matched = []
    for c in components:
        group = normalize_system_slug(c.component_group)
        if slug == "brakes":
            if "brake" in group:
                matched.append(c)
        elif group == slug:
            matched.append(c)
    return matched

# equipment/services/catalog_service.py

"""
CATALOG OPTIONS (replacement part picker)

For one component name, narrow the catalog step by step:
brand/size -> series -> model.
"""

from __future__ import annotations

from dataclasses import dataclass

from equipment.models import MasterComponent


@dataclass
class CatalogOptions:
    brands: list[str]
    sizes: list[str]
    series: list[str]
    models: list[MasterComponent]


def _distinct_sorted(qs, field_name: str) -> list[str]:
    values = qs.exclude(**{field_name: ""}).values_list(field_name, flat=True).distinct()
    return sorted(set(values))


def catalog_options(
    *,
    component_name: str,
    brand: str | None = None,
    size: str | None = None,
    series: str | None = None,
) -> CatalogOptions:
    base = MasterComponent.objects.filter(name__iexact=(component_name or "").strip())

    narrowed = base
    if brand:
        narrowed = narrowed.filter(brand=brand)
    if size:
        narrowed = narrowed.filter(size=size)

    models_qs = narrowed.filter(series=series) if series else narrowed

    return CatalogOptions(
        brands=_distinct_sorted(base, "brand"),
        sizes=_distinct_sorted(base, "size"),
        series=_distinct_sorted(narrowed, "series"),
        models=list(models_qs.order_by("model", "id")),
    )

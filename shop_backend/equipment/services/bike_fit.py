# equipment/services/bike_fit.py

"""
BIKE FIT NORMALIZATION

Fit data is stored as JSON on Equipment.fit_data. Only known keys survive;
numeric measurements that are missing, non-numeric or non-finite are dropped.
"""

from __future__ import annotations

import math
from typing import Any

from equipment.models import Equipment
from equipment.services.exceptions import InvalidFitDataError

NUMERIC_FIELDS = (
    "saddle_height",
    "saddle_height_over_bars",
    "saddle_to_handlebar_reach",
    "saddle_angle",
    "saddle_fore_aft",
    "stem_length",
    "stem_angle",
    "handlebar_width",
    "handlebar_angle",
    "handlebar_extension",
    "crank_length",
)

TEXT_FIELDS = (
    "saddle_brand_model",
    "handlebar_brand_model",
    "brake_lever_position",
)

CLEAT_FIELDS = ("fore_aft", "lateral", "rotational")


def _finite(value: Any) -> float | None:
    if value is None or isinstance(value, bool) or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def clean_fit_data(raw: dict) -> dict:
    if not isinstance(raw, dict):
        raise InvalidFitDataError("Fit data must be an object")

    cleaned: dict[str, Any] = {}

    for key in NUMERIC_FIELDS:
        number = _finite(raw.get(key))
        if number is not None:
            cleaned[key] = number

    for key in TEXT_FIELDS:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            cleaned[key] = value.strip()

    aero = raw.get("has_aero_bars", False)
    if isinstance(aero, str):
        aero = aero.strip().lower() in ("true", "1", "yes", "on")
    cleaned["has_aero_bars"] = bool(aero)

    cleat = raw.get("cleat_position")
    if isinstance(cleat, dict):
        position = {}
        for key in CLEAT_FIELDS:
            number = _finite(cleat.get(key))
            if number is not None:
                position[key] = number
        if position:
            cleaned["cleat_position"] = position

    return cleaned


def save_bike_fit(*, equipment: Equipment, fit_data: dict) -> Equipment:
    equipment.fit_data = clean_fit_data(fit_data)
    equipment.save(update_fields=["fit_data", "updated_at"])
    return equipment

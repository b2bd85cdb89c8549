# shops/services/geohash.py

"""
GEOHASH

Bit-interleaving geohash codec used to index shop locations for proximity lookups.

- Longitude bits first, then latitude, alternating.
- A bit is 1 when the value is strictly greater than the interval midpoint.
- 5 bits per base32 character.
"""

from __future__ import annotations

import math

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
BITS = (16, 8, 4, 2, 1)

_DECODE_MAP = {ch: i for i, ch in enumerate(BASE32)}

DEFAULT_PRECISION = 9
MAX_PRECISION = 12


def _check_coordinates(lat: float, lng: float) -> None:
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError("lat and lng must be finite numbers")
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"lat out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"lng out of range: {lng}")


def encode(lat: float, lng: float, precision: int = DEFAULT_PRECISION) -> str:
    if lat is None or lng is None:
        raise ValueError("lat and lng are required")
    lat = float(lat)
    lng = float(lng)
    _check_coordinates(lat, lng)

    if precision < 1 or precision > MAX_PRECISION:
        raise ValueError(f"precision must be between 1 and {MAX_PRECISION}")

    lat_range = [-90.0, 90.0]
    lng_range = [-180.0, 180.0]

    chars = []
    is_even = True
    bit = 0
    ch = 0

    while len(chars) < precision:
        if is_even:
            mid = (lng_range[0] + lng_range[1]) / 2
            if lng > mid:
                ch |= BITS[bit]
                lng_range[0] = mid
            else:
                lng_range[1] = mid
        else:
            mid = (lat_range[0] + lat_range[1]) / 2
            if lat > mid:
                ch |= BITS[bit]
                lat_range[0] = mid
            else:
                lat_range[1] = mid

        is_even = not is_even
        if bit < 4:
            bit += 1
        else:
            chars.append(BASE32[ch])
            bit = 0
            ch = 0

    return "".join(chars)


def decode_bbox(geohash: str) -> tuple[float, float, float, float]:
    """
    Return the cell bounds as (lat_min, lat_max, lng_min, lng_max).
    """
    value = (geohash or "").strip().lower()
    if not value:
        raise ValueError("geohash is required")

    lat_range = [-90.0, 90.0]
    lng_range = [-180.0, 180.0]
    is_even = True

    for c in value:
        cd = _DECODE_MAP.get(c)
        if cd is None:
            raise ValueError(f"invalid geohash character: {c!r}")

        for mask in BITS:
            rng = lng_range if is_even else lat_range
            mid = (rng[0] + rng[1]) / 2
            if cd & mask:
                rng[0] = mid
            else:
                rng[1] = mid
            is_even = not is_even

    return lat_range[0], lat_range[1], lng_range[0], lng_range[1]


def decode(geohash: str) -> tuple[float, float]:
    """Centre point (lat, lng) of the geohash cell."""
    lat_min, lat_max, lng_min, lng_max = decode_bbox(geohash)
    return (lat_min + lat_max) / 2, (lng_min + lng_max) / 2

# shops/services/search_service.py

"""
Proximity search over shop geohashes.

Shops sharing a geohash prefix with the query point are in the same cell.
Shorter prefixes mean larger cells (5 chars ~ 4.9km x 4.9km).
"""

from __future__ import annotations

from shops.models import Shop
from shops.services import geohash

DEFAULT_SEARCH_PRECISION = 5


def find_nearby_shops(*, lat: float, lng: float, precision: int = DEFAULT_SEARCH_PRECISION):
    prefix = geohash.encode(lat, lng, precision)
    return Shop.objects.filter(
        is_active=True,
        onboarding_complete=True,
        geohash__startswith=prefix,
    ).order_by("name")

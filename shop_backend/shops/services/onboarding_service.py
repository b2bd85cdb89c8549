# shops/services/onboarding_service.py

"""
SHOP ONBOARDING + PROFILE (APPLICATION SERVICE)

Purpose:
- Turn a freshly signed-up owner account into a Shop (tenant).
- Geocode the shop address (lat/lng + geohash) for proximity search.
- Keep owner account and Shop in sync (role, shop link, display name).

Geocoding happens BEFORE the transaction opens so no DB transaction is held
across a network call.
"""

from __future__ import annotations

import logging

from django.db import transaction

from permissions.roles import ROLE_OWNER
from shops.models import Shop
from shops.services.exceptions import AlreadyOnboardedError, ShopServiceError
from shops.services.geocoding import GeocodeResult, geocode_address, geocoding_enabled

logger = logging.getLogger(__name__)

PROFILE_FIELDS = {
    "name",
    "address",
    "phone",
    "services",
    "country",
    "state",
    "city",
    "postal_code",
    "billing_email",
    "promo_code",
}

AVAILABILITY_FIELDS = {"availability", "drop_off", "valet_service"}


def _locate(address: str) -> GeocodeResult | None:
    if not geocoding_enabled():
        logger.info("Geocoding disabled; storing shop without coordinates")
        return None
    return geocode_address(address)


def _apply_location(shop: Shop, location: GeocodeResult | None) -> None:
    if location is None:
        shop.lat = None
        shop.lng = None
        shop.geohash = ""
        return
    shop.lat = location.lat
    shop.lng = location.lng
    shop.geohash = location.geohash


def onboard_shop(*, owner, name: str, address: str, phone: str, services: str) -> Shop:
    name = (name or "").strip()
    address = (address or "").strip()
    phone = (phone or "").strip()

    if not name:
        raise ShopServiceError("Shop name is required")
    if not address:
        raise ShopServiceError("Address is required")
    if not phone:
        raise ShopServiceError("Phone number is required")
    if services not in Shop.Services.values:
        raise ShopServiceError(f"Invalid services value: {services}")

    existing = Shop.objects.filter(owner=owner).first()
    if existing is not None and existing.onboarding_complete:
        raise AlreadyOnboardedError("This shop has already been onboarded.")

    location = _locate(address)

    with transaction.atomic():
        shop = existing or Shop(owner=owner)
        shop.name = name
        shop.address = address
        shop.phone = phone
        shop.services = services
        _apply_location(shop, location)
        shop.onboarding_complete = True
        shop.save()

        owner.role = ROLE_OWNER
        owner.shop = shop
        owner.shop_name = name
        if not owner.phone:
            owner.phone = phone
        owner.save(update_fields=["role", "shop", "shop_name", "phone", "updated_at"])

    logger.info(
        "Shop onboarded",
        extra={"shop_id": str(shop.id), "owner_id": str(owner.id), "geohash": shop.geohash},
    )
    return shop


def update_shop_profile(*, shop: Shop, **changes) -> Shop:
    unknown = set(changes) - PROFILE_FIELDS
    if unknown:
        raise ShopServiceError(f"Unknown profile fields: {sorted(unknown)}")

    if "services" in changes and changes["services"] not in Shop.Services.values:
        raise ShopServiceError(f"Invalid services value: {changes['services']}")

    new_address = changes.get("address")
    if new_address is not None and not new_address.strip():
        raise ShopServiceError("Address is required")

    relocate = new_address is not None and new_address.strip() != (shop.address or "").strip()
    location = _locate(new_address) if relocate else None

    with transaction.atomic():
        for field, value in changes.items():
            setattr(shop, field, value.strip() if isinstance(value, str) else value)
        if relocate:
            _apply_location(shop, location)
        shop.save()

        if "name" in changes:
            shop.owner.shop_name = shop.name
            shop.owner.save(update_fields=["shop_name", "updated_at"])

    if relocate:
        logger.info(
            "Shop relocated",
            extra={"shop_id": str(shop.id), "geohash": shop.geohash},
        )
    return shop


def update_availability(*, shop: Shop, **changes) -> Shop:
    unknown = set(changes) - AVAILABILITY_FIELDS
    if unknown:
        raise ShopServiceError(f"Unknown availability fields: {sorted(unknown)}")

    availability = changes.get("availability")
    if availability is not None and availability not in Shop.Availability.values:
        raise ShopServiceError(f"Invalid availability value: {availability}")

    for field, value in changes.items():
        setattr(shop, field, value)
    shop.save(update_fields=[*changes.keys(), "updated_at"])
    return shop

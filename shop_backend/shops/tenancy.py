# shops/tenancy.py

"""
TENANCY RESOLUTION

Every staff-side request acts on exactly one Shop:
- owners: the Shop they own (Shop.owner)
- admin / mechanic / staff logins: the Shop they belong to (User.shop)
- customers and un-onboarded owners: no shop
"""

from __future__ import annotations

from rest_framework.exceptions import PermissionDenied

from shops.models import Shop


def shop_for_user(user) -> Shop | None:
    if not user or not getattr(user, "is_authenticated", False):
        return None

    try:
        owned = user.owned_shop
    except Shop.DoesNotExist:
        owned = None

    if owned is not None:
        return owned if owned.is_active else None

    shop = getattr(user, "shop", None)
    if shop is not None and shop.is_active:
        return shop
    return None


def get_request_shop(request) -> Shop:
    """
    Resolve (and cache on the request) the acting shop, or deny.
    """
    cached = getattr(request, "_shop", None)
    if cached is not None:
        return cached

    shop = shop_for_user(request.user)
    if shop is None:
        raise PermissionDenied("No shop is linked to this account. Complete onboarding first.")

    request._shop = shop
    return shop


class ShopScopedMixin:
    """
    ViewSet mixin exposing `self.shop` for the acting tenant.
    """

    @property
    def shop(self) -> Shop:
        return get_request_shop(self.request)

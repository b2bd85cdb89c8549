from .shop import (
    NearbyShopQuerySerializer,
    PublicShopSerializer,
    ShopAvailabilitySerializer,
    ShopOnboardingCommandSerializer,
    ShopOverviewSerializer,
    ShopProfileSerializer,
)

__all__ = [
    "ShopProfileSerializer",
    "ShopAvailabilitySerializer",
    "ShopOnboardingCommandSerializer",
    "ShopOverviewSerializer",
    "NearbyShopQuerySerializer",
    "PublicShopSerializer",
]

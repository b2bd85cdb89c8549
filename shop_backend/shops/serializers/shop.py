# shops/serializers/shop.py

from rest_framework import serializers

from shops.models import Shop
from shops.services.geohash import MAX_PRECISION


class ShopProfileSerializer(serializers.ModelSerializer):
    """
    Shop profile (settings page).

    Coordinates are derived from the address and never written directly.
    """

    class Meta:
        model = Shop
        fields = [
            "id",
            "name",
            "address",
            "phone",
            "services",
            "lat",
            "lng",
            "geohash",
            "country",
            "state",
            "city",
            "postal_code",
            "billing_email",
            "promo_code",
            "onboarding_complete",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "lat",
            "lng",
            "geohash",
            "onboarding_complete",
            "created_at",
            "updated_at",
        ]


class ShopAvailabilitySerializer(serializers.ModelSerializer):
    class Meta:
        model = Shop
        fields = ["availability", "drop_off", "valet_service"]


class ShopOnboardingCommandSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    address = serializers.CharField()
    phone = serializers.CharField(max_length=50)
    services = serializers.ChoiceField(choices=Shop.Services.choices)


class ShopOverviewSerializer(serializers.Serializer):
    open_work_orders = serializers.IntegerField()
    completed_this_month = serializers.IntegerField()
    team_members = serializers.IntegerField()
    revenue_mtd = serializers.DecimalField(max_digits=12, decimal_places=2)


class NearbyShopQuerySerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90.0, max_value=90.0)
    lng = serializers.FloatField(min_value=-180.0, max_value=180.0)
    precision = serializers.IntegerField(min_value=1, max_value=MAX_PRECISION, default=5)


class PublicShopSerializer(serializers.ModelSerializer):
    """
    Minimal public listing (no billing data).
    """

    class Meta:
        model = Shop
        fields = [
            "id",
            "name",
            "address",
            "phone",
            "services",
            "lat",
            "lng",
            "geohash",
            "availability",
            "drop_off",
            "valet_service",
        ]
        read_only_fields = fields

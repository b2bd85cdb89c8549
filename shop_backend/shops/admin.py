# shops/admin.py

from django.contrib import admin

from shops.models import Shop


@admin.register(Shop)
class ShopAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "owner",
        "services",
        "availability",
        "geohash",
        "onboarding_complete",
        "is_active",
    )
    readonly_fields = ("lat", "lng", "geohash", "created_at", "updated_at")
    search_fields = ("name", "address", "owner__email")
    list_filter = ("services", "availability", "onboarding_complete", "is_active")

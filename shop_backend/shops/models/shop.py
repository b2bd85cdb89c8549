# shops/models/shop.py

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Shop(models.Model):
    """
    A bike shop (service provider). The tenant every staff-side record hangs off.

    Guarantees:
    - exactly one Shop per owner account
    - geohash is derived from lat/lng (never edited directly)
    - availability always has a value (defaults to "Today")
    """

    class Services(models.TextChoices):
        REPAIRS = "repairs", "Repairs"
        RENTALS = "rentals", "Rentals"
        FITTING = "fitting", "Fitting"

    class Availability(models.TextChoices):
        TODAY = "Today", "Today"
        TWO_THREE_DAYS = "2-3 Day Wait", "2-3 Day Wait"
        ONE_WEEK = "One Week Wait", "One Week Wait"
        NOT_TAKING_ORDERS = "Not Taking Orders", "Not Taking Orders"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="owned_shop",
    )

    name = models.CharField(max_length=255)
    address = models.TextField(blank=True)
    phone = models.CharField(max_length=50, blank=True)

    services = models.CharField(
        max_length=16,
        choices=Services.choices,
        default=Services.REPAIRS,
    )

    # Location (filled by geocoding the address)
    lat = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)],
    )
    lng = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)],
    )
    geohash = models.CharField(max_length=12, blank=True, db_index=True)

    # Availability settings shown to riders
    availability = models.CharField(
        max_length=32,
        choices=Availability.choices,
        default=Availability.TODAY,
    )
    drop_off = models.BooleanField(default=False)
    valet_service = models.BooleanField(default=False)

    # Billing / location profile
    country = models.CharField(max_length=2, blank=True, help_text="ISO 3166-1 alpha-2")
    state = models.CharField(max_length=100, blank=True)
    city = models.CharField(max_length=100, blank=True)
    postal_code = models.CharField(max_length=20, blank=True)
    billing_email = models.EmailField(blank=True)
    promo_code = models.CharField(max_length=50, blank=True)

    onboarding_complete = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(
                fields=["is_active", "onboarding_complete", "geohash"],
                name="shop_active_onboard_geo_idx",
            ),
        ]

    @property
    def has_location(self) -> bool:
        return self.lat is not None and self.lng is not None

    def __str__(self):
        return self.name

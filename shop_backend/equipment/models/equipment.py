# equipment/models/equipment.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

# Not a closed set: riders can enter free-text types. These are the ones
# the dashboard knows how to treat specially.
TYPE_ROAD_BIKE = "Road Bike"
TYPE_MOUNTAIN_BIKE = "Mountain Bike"
TYPE_GRAVEL_BIKE = "Gravel Bike"
TYPE_TT_BIKE = "Time Trial Bike"
TYPE_CYCLING_SHOES = "Cycling Shoes"
TYPE_WHEELSET = "Wheelset"

EBIKE_TYPES = (
    "E-Bike",
    "E-Road Bike",
    "E-Mountain Bike",
    "E-Gravel Bike",
    "E-Hybrid Bike",
    "E-Cargo Bike",
)

BASE_SYSTEMS = (
    "Drivetrain",
    "Brakes",
    "Frameset",
    "Wheelset",
    "Cockpit",
    "Accessories",
)
EBIKE_SYSTEM = "E-Bike"


class Equipment(models.Model):
    """
    A customer-owned asset (bike, shoes, wheelset).

    RULES:
    - owner is the rider (customer account), never the shop
    - totals (distance km / hours) are non-negative
    - associated_equipment links e.g. shoes -> bikes, bike -> spare wheelsets
      (directional, not symmetric)
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="equipment",
    )

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=64, db_index=True)
    brand = models.CharField(max_length=120, blank=True)
    model = models.CharField(max_length=120, blank=True)

    frame_size = models.CharField(max_length=32, blank=True)
    # shoe size (frame_size is the bike equivalent)
    size = models.CharField(max_length=32, blank=True)

    purchase_date = models.DateField(null=True, blank=True)
    purchase_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    total_distance = models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])
    total_hours = models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])

    fit_data = models.JSONField(null=True, blank=True)

    associated_equipment = models.ManyToManyField(
        "self",
        symmetrical=False,
        blank=True,
        related_name="associated_with",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["owner", "type"], name="equipment_owner_type_idx"),
        ]

    @property
    def is_shoes(self) -> bool:
        return self.type == TYPE_CYCLING_SHOES

    @property
    def is_ebike(self) -> bool:
        return self.type in EBIKE_TYPES

    @property
    def systems(self) -> list[str]:
        systems = list(BASE_SYSTEMS)
        if self.is_ebike:
            systems.append(EBIKE_SYSTEM)
        return systems

    def __str__(self):
        return f"{self.name} ({self.type})"

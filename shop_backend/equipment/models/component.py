# equipment/models/component.py

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .equipment import Equipment


class MasterComponent(models.Model):
    """
    Shared catalog entry for a part (e.g. "Chain", Shimano, Ultegra, CN-M8100).

    The catalog is curated independently of customer data: rows may be pruned,
    so user components reference it softly (see UserComponent.master_component_id).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # component name ("Chain", "Cassette", "Brake Pads", ...)
    name = models.CharField(max_length=120, db_index=True)
    # component group ("Drivetrain", "Brakes", "Disc Brakes", ...)
    system = models.CharField(max_length=64, db_index=True)

    brand = models.CharField(max_length=120, blank=True)
    series = models.CharField(max_length=120, blank=True)
    model = models.CharField(max_length=120, blank=True)
    size = models.CharField(max_length=64, blank=True)

    lifespan_hours = models.PositiveIntegerField(null=True, blank=True)
    lifespan_distance = models.PositiveIntegerField(null=True, blank=True, help_text="km")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["system", "name", "brand", "model"]
        indexes = [
            models.Index(fields=["name", "brand"], name="mastercomp_name_brand_idx"),
        ]

    def __str__(self):
        label = " ".join(p for p in (self.brand, self.series, self.model) if p)
        return f"{self.name} - {label}" if label else self.name


class UserComponent(models.Model):
    """
    A concrete part fitted to one piece of equipment, carrying wear state.

    RULES:
    - master_component_id is a SOFT reference into MasterComponent (no FK)
    - wear_percentage is within [0, 100]
    - replaced parts are deactivated (is_active=False), not deleted, so the
      history of what was fitted survives
    - parent links sub-components (e.g. brake pads -> brake caliper)
    """

    class ReplacementReason(models.TextChoices):
        FAILURE = "failure", "Failure"
        MODIFICATION = "modification", "Modification"
        UPGRADE = "upgrade", "Upgrade"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    equipment = models.ForeignKey(
        Equipment,
        on_delete=models.CASCADE,
        related_name="components",
    )

    master_component_id = models.UUIDField(null=True, blank=True, db_index=True)

    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sub_components",
    )

    purchase_date = models.DateField(null=True, blank=True)
    last_service_date = models.DateField(null=True, blank=True)

    total_distance = models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])
    total_hours = models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])
    wear_percentage = models.FloatField(
        default=0.0,
        validators=[MinValueValidator(0.0), MaxValueValidator(100.0)],
    )

    notes = models.TextField(blank=True)
    size = models.CharField(max_length=64, blank=True)

    is_active = models.BooleanField(default=True)
    replaced_at = models.DateTimeField(null=True, blank=True)
    replacement_reason = models.CharField(
        max_length=16,
        choices=ReplacementReason.choices,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["equipment", "is_active"], name="usercomp_equip_active_idx"),
        ]

    def __str__(self):
        return f"UserComponent {self.id} on {self.equipment_id}"

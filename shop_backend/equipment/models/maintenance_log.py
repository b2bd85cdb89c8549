# equipment/models/maintenance_log.py

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from .equipment import Equipment


class MaintenanceLog(models.Model):
    """
    Append-only service history entry for a piece of equipment.

    shop / shop_name are stamped when a shop records the entry; shop_name is a
    snapshot so history survives a shop rename or removal.
    """

    class ServiceType(models.TextChoices):
        SERVICED = "serviced", "Serviced"
        REPLACED = "replaced", "Replaced"
        INSPECTED = "inspected", "Inspected"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    equipment = models.ForeignKey(
        Equipment,
        on_delete=models.CASCADE,
        related_name="maintenance_log",
    )

    date = models.DateField()
    component_name = models.CharField(max_length=120)
    service_type = models.CharField(
        max_length=16,
        choices=ServiceType.choices,
        default=ServiceType.SERVICED,
    )
    notes = models.TextField(blank=True)

    cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    shop = models.ForeignKey(
        "shops.Shop",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="maintenance_entries",
    )
    shop_name = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date", "-created_at"]

    def __str__(self):
        return f"{self.date} {self.component_name} ({self.service_type})"

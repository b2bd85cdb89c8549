# work_orders/models/work_order.py

import uuid

from django.conf import settings
from django.db import models

NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description"


class WorkOrder(models.Model):
    """
    A customer service request handled by one shop.

    Status moves through a fixed, ordered sequence (STATUS_SEQUENCE). Any status
    in the sequence can be chosen at any time; the order is for display and
    reporting, not a state machine.

    Customer + equipment details are snapshotted at creation so the order
    still reads correctly after the rider edits or deletes their records.
    """

    class Status(models.TextChoices):
        NEW = "New", "New"
        CUSTOMER_CONTACTED = "Customer Contacted", "Customer Contacted"
        APPOINTMENT_BOOKED = "Appointment Booked", "Appointment Booked"
        BIKE_IN_SHOP = "Bike in Shop", "Bike in Shop"
        AWAITING_PARTS = "Awaiting Parts", "Awaiting Parts"
        AWAITING_SERVICE = "Awaiting Service", "Awaiting Service"
        IN_SERVICE = "In Service", "In Service"
        TESTING = "Testing", "Testing"
        BIKE_READY = "Bike Ready", "Bike Ready"
        COMPLETED = "Completed", "Completed"

    class Priority(models.TextChoices):
        LOW = "Low", "Low"
        MEDIUM = "Medium", "Medium"
        HIGH = "High", "High"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    shop = models.ForeignKey(
        "shops.Shop",
        on_delete=models.CASCADE,
        related_name="work_orders",
    )

    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="work_orders",
    )
    customer_name = models.CharField(max_length=255, blank=True)
    customer_email = models.EmailField(blank=True)
    customer_phone = models.CharField(max_length=50, blank=True)

    equipment = models.ForeignKey(
        "equipment.Equipment",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="work_orders",
    )
    equipment_name = models.CharField(max_length=255, blank=True)
    equipment_brand = models.CharField(max_length=120, blank=True)
    equipment_model = models.CharField(max_length=120, blank=True)

    # what the customer asked for ("issue description")
    service_type = models.CharField(max_length=255, blank=True)
    notes = models.TextField(blank=True)
    internal_notes = models.TextField(blank=True)

    # max_length leaves room for legacy values (e.g. "pending") until normalized
    status = models.CharField(
        max_length=32,
        choices=Status.choices,
        default=Status.NEW,
        db_index=True,
    )
    priority = models.CharField(
        max_length=8,
        choices=Priority.choices,
        null=True,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["shop", "status"], name="workorder_shop_status_idx"),
            models.Index(fields=["shop", "-created_at"], name="workorder_shop_created_idx"),
        ]

    @property
    def short_id(self) -> str:
        return str(self.id)[:7]

    @property
    def display_customer_name(self) -> str:
        return self.customer_name or NOT_AVAILABLE

    @property
    def bike(self) -> str:
        if self.equipment_brand and self.equipment_model:
            return f"{self.equipment_brand} {self.equipment_model}"
        return NOT_AVAILABLE

    @property
    def issue_description(self) -> str:
        return self.service_type or NO_DESCRIPTION

    @property
    def is_completed(self) -> bool:
        return self.status == self.Status.COMPLETED

    def __str__(self):
        return f"WorkOrder #{self.short_id} ({self.status})"


STATUS_SEQUENCE = [choice for choice, _ in WorkOrder.Status.choices]

"""
PATH: work_orders/migrations/0001_initial.py

MIGRATION: CREATE WorkOrder
"""

from __future__ import annotations

import uuid

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("users", "0001_initial"),
        ("shops", "0001_initial"),
        ("equipment", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="WorkOrder",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("customer_name", models.CharField(blank=True, max_length=255)),
                ("customer_email", models.EmailField(blank=True, max_length=254)),
                ("customer_phone", models.CharField(blank=True, max_length=50)),
                ("equipment_name", models.CharField(blank=True, max_length=255)),
                ("equipment_brand", models.CharField(blank=True, max_length=120)),
                ("equipment_model", models.CharField(blank=True, max_length=120)),
                ("service_type", models.CharField(blank=True, max_length=255)),
                ("notes", models.TextField(blank=True)),
                ("internal_notes", models.TextField(blank=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("New", "New"),
                            ("Customer Contacted", "Customer Contacted"),
                            ("Appointment Booked", "Appointment Booked"),
                            ("Bike in Shop", "Bike in Shop"),
                            ("Awaiting Parts", "Awaiting Parts"),
                            ("Awaiting Service", "Awaiting Service"),
                            ("In Service", "In Service"),
                            ("Testing", "Testing"),
                            ("Bike Ready", "Bike Ready"),
                            ("Completed", "Completed"),
                        ],
                        db_index=True,
                        default="New",
                        max_length=32,
                    ),
                ),
                (
                    "priority",
                    models.CharField(
                        blank=True,
                        choices=[("Low", "Low"), ("Medium", "Medium"), ("High", "High")],
                        max_length=8,
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                (
                    "shop",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="work_orders",
                        to="shops.shop",
                    ),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="work_orders",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "equipment",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="work_orders",
                        to="equipment.equipment",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["shop", "status"], name="workorder_shop_status_idx"),
                    models.Index(fields=["shop", "-created_at"], name="workorder_shop_created_idx"),
                ],
            },
        ),
    ]

"""
PATH: equipment/migrations/0001_initial.py

MIGRATION: CREATE Equipment, MasterComponent, UserComponent, MaintenanceLog

UserComponent.master_component_id is a plain UUID column (soft reference into
the catalog), not a foreign key.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("users", "0001_initial"),
        ("shops", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Equipment",
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
                ("name", models.CharField(max_length=255)),
                ("type", models.CharField(db_index=True, max_length=64)),
                ("brand", models.CharField(blank=True, max_length=120)),
                ("model", models.CharField(blank=True, max_length=120)),
                ("frame_size", models.CharField(blank=True, max_length=32)),
                ("size", models.CharField(blank=True, max_length=32)),
                ("purchase_date", models.DateField(blank=True, null=True)),
                (
                    "purchase_price",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "total_distance",
                    models.FloatField(default=0.0, validators=[django.core.validators.MinValueValidator(0.0)]),
                ),
                (
                    "total_hours",
                    models.FloatField(default=0.0, validators=[django.core.validators.MinValueValidator(0.0)]),
                ),
                ("fit_data", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="equipment",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "associated_equipment",
                    models.ManyToManyField(
                        blank=True,
                        related_name="associated_with",
                        to="equipment.equipment",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["owner", "type"], name="equipment_owner_type_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="MasterComponent",
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
                ("name", models.CharField(db_index=True, max_length=120)),
                ("system", models.CharField(db_index=True, max_length=64)),
                ("brand", models.CharField(blank=True, max_length=120)),
                ("series", models.CharField(blank=True, max_length=120)),
                ("model", models.CharField(blank=True, max_length=120)),
                ("size", models.CharField(blank=True, max_length=64)),
                ("lifespan_hours", models.PositiveIntegerField(blank=True, null=True)),
                ("lifespan_distance", models.PositiveIntegerField(blank=True, help_text="km", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["system", "name", "brand", "model"],
                "indexes": [
                    models.Index(fields=["name", "brand"], name="mastercomp_name_brand_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="UserComponent",
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
                ("master_component_id", models.UUIDField(blank=True, db_index=True, null=True)),
                ("purchase_date", models.DateField(blank=True, null=True)),
                ("last_service_date", models.DateField(blank=True, null=True)),
                (
                    "total_distance",
                    models.FloatField(default=0.0, validators=[django.core.validators.MinValueValidator(0.0)]),
                ),
                (
                    "total_hours",
                    models.FloatField(default=0.0, validators=[django.core.validators.MinValueValidator(0.0)]),
                ),
                (
                    "wear_percentage",
                    models.FloatField(
                        default=0.0,
                        validators=[
                            django.core.validators.MinValueValidator(0.0),
                            django.core.validators.MaxValueValidator(100.0),
                        ],
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                ("size", models.CharField(blank=True, max_length=64)),
                ("is_active", models.BooleanField(default=True)),
                ("replaced_at", models.DateTimeField(blank=True, null=True)),
                (
                    "replacement_reason",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("failure", "Failure"),
                            ("modification", "Modification"),
                            ("upgrade", "Upgrade"),
                        ],
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "equipment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="components",
                        to="equipment.equipment",
                    ),
                ),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="sub_components",
                        to="equipment.usercomponent",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["equipment", "is_active"], name="usercomp_equip_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="MaintenanceLog",
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
                ("date", models.DateField()),
                ("component_name", models.CharField(max_length=120)),
                (
                    "service_type",
                    models.CharField(
                        choices=[
                            ("serviced", "Serviced"),
                            ("replaced", "Replaced"),
                            ("inspected", "Inspected"),
                        ],
                        default="serviced",
                        max_length=16,
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                (
                    "cost",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        max_digits=10,
                        null=True,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("shop_name", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "equipment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="maintenance_log",
                        to="equipment.equipment",
                    ),
                ),
                (
                    "shop",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="maintenance_entries",
                        to="shops.shop",
                    ),
                ),
            ],
            options={
                "ordering": ["-date", "-created_at"],
            },
        ),
    ]

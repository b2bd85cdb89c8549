"""
PATH: shops/migrations/0001_initial.py

MIGRATION: CREATE Shop
"""

from __future__ import annotations

import uuid

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Shop",
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
                ("address", models.TextField(blank=True)),
                ("phone", models.CharField(blank=True, max_length=50)),
                (
                    "services",
                    models.CharField(
                        choices=[("repairs", "Repairs"), ("rentals", "Rentals"), ("fitting", "Fitting")],
                        default="repairs",
                        max_length=16,
                    ),
                ),
                (
                    "lat",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(-90.0),
                            django.core.validators.MaxValueValidator(90.0),
                        ],
                    ),
                ),
                (
                    "lng",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(-180.0),
                            django.core.validators.MaxValueValidator(180.0),
                        ],
                    ),
                ),
                ("geohash", models.CharField(blank=True, db_index=True, max_length=12)),
                (
                    "availability",
                    models.CharField(
                        choices=[
                            ("Today", "Today"),
                            ("2-3 Day Wait", "2-3 Day Wait"),
                            ("One Week Wait", "One Week Wait"),
                            ("Not Taking Orders", "Not Taking Orders"),
                        ],
                        default="Today",
                        max_length=32,
                    ),
                ),
                ("drop_off", models.BooleanField(default=False)),
                ("valet_service", models.BooleanField(default=False)),
                ("country", models.CharField(blank=True, help_text="ISO 3166-1 alpha-2", max_length=2)),
                ("state", models.CharField(blank=True, max_length=100)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("postal_code", models.CharField(blank=True, max_length=20)),
                ("billing_email", models.EmailField(blank=True, max_length=254)),
                ("promo_code", models.CharField(blank=True, max_length=50)),
                ("onboarding_complete", models.BooleanField(default=False)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="owned_shop",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(
                        fields=["is_active", "onboarding_complete", "geohash"],
                        name="shop_active_onboard_geo_idx",
                    ),
                ],
            },
        ),
    ]

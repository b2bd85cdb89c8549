# users/management/commands/seed_users.py

"""
Seed demo accounts for local development:
- owner    (with an onboarded demo shop)
- mechanic (member of the demo shop)
- customer (rider account)

Idempotent: re-running only re-aligns role / shop membership.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from permissions.roles import ROLE_CUSTOMER, ROLE_MECHANIC, ROLE_OWNER
from shops.models import Shop
from shops.services import geohash

DEMO_SHOP_NAME = "Spoke & Chain Cycles"
DEMO_SHOP_ADDRESS = "1 Market St, San Francisco, CA 94105"
DEMO_SHOP_LAT = 37.7936
DEMO_SHOP_LNG = -122.3958


@dataclass(frozen=True)
class SeedUserSpec:
    label: str
    role: str
    email: str
    first_name: str
    last_name: str


SEED_USERS = [
    SeedUserSpec("Owner", ROLE_OWNER, "owner@example.com", "Olive", "Owner"),
    SeedUserSpec("Mechanic", ROLE_MECHANIC, "mechanic@example.com", "Max", "Mechanic"),
    SeedUserSpec("Customer", ROLE_CUSTOMER, "customer@example.com", "Casey", "Rider"),
]


def _upsert_user(*, User, spec: SeedUserSpec, password: str):
    user, created = User.objects.get_or_create(
        email=spec.email,
        defaults={
            "first_name": spec.first_name,
            "last_name": spec.last_name,
            "role": spec.role,
        },
    )

    if created:
        user.set_password(password)
        user.save(update_fields=["password"])
    elif user.role != spec.role:
        user.role = spec.role
        user.save(update_fields=["role", "updated_at"])

    return user, created


def _ensure_demo_shop(owner) -> Shop:
    shop, _ = Shop.objects.get_or_create(
        owner=owner,
        defaults={
            "name": DEMO_SHOP_NAME,
            "address": DEMO_SHOP_ADDRESS,
            "phone": "+1 415 555 0100",
            "services": Shop.Services.REPAIRS,
            "lat": DEMO_SHOP_LAT,
            "lng": DEMO_SHOP_LNG,
            "geohash": geohash.encode(DEMO_SHOP_LAT, DEMO_SHOP_LNG),
            "onboarding_complete": True,
        },
    )

    owner.shop = shop
    owner.shop_name = shop.name
    owner.save(update_fields=["shop", "shop_name", "updated_at"])
    return shop


class Command(BaseCommand):
    help = "Seed demo owner / mechanic / customer accounts and a demo shop."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            type=str,
            default="Pass1234!",
            help="Password for seeded users (default: Pass1234!)",
        )
        parser.add_argument(
            "--force-password",
            action="store_true",
            help="If set, resets password for existing seeded users too.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        password = options.get("password") or ""
        force_password = bool(options.get("force_password"))

        if len(password) < 6:
            raise CommandError("--password must be provided and at least 6 characters.")

        User = get_user_model()
        seeded = {}
        created_count = 0
        reset_count = 0

        for spec in SEED_USERS:
            user, created = _upsert_user(User=User, spec=spec, password=password)
            seeded[spec.role] = user

            if force_password and not created:
                user.set_password(password)
                user.save(update_fields=["password"])
                reset_count += 1

            if created:
                created_count += 1
                self.stdout.write(f"created: {spec.label} <{spec.email}>")
            else:
                self.stdout.write(f"exists:  {spec.label} <{spec.email}>")

        shop = _ensure_demo_shop(seeded[ROLE_OWNER])

        mechanic = seeded[ROLE_MECHANIC]
        if mechanic.shop_id != shop.id:
            mechanic.shop = shop
            mechanic.save(update_fields=["shop", "updated_at"])

        self.stdout.write("\n--- Summary ---")
        self.stdout.write(f"Created users: {created_count}")
        if force_password:
            self.stdout.write(f"Passwords reset: {reset_count}")
        self.stdout.write(self.style.SUCCESS(f"Demo shop ready: {shop.name} ({shop.geohash})"))

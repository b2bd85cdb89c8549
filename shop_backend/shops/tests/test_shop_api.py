# shops/tests/test_shop_api.py

from datetime import date
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APIClient

from employees.models import Employee
from equipment.models import Equipment, MaintenanceLog
from shops.models import Shop
from shops.services import geohash
from shops.services.exceptions import GeocodingError
from work_orders.models import WorkOrder

User = get_user_model()

GEOCODING_ON = {
    "ENABLED": True,
    "API_KEY": "test-key",
    "BASE_URL": "https://geocoder.test/json",
    "TIMEOUT_SECONDS": 3,
    "GEOHASH_PRECISION": 9,
}


def _make_shop(owner, name="Spoke & Chain", lat=None, lng=None, **extra) -> Shop:
    shop = Shop.objects.create(
        owner=owner,
        name=name,
        address="1 Market St",
        phone="555-0100",
        lat=lat,
        lng=lng,
        geohash=geohash.encode(lat, lng) if lat is not None else "",
        onboarding_complete=True,
        **extra,
    )
    owner.shop = shop
    owner.save(update_fields=["shop"])
    return shop


class OnboardingApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass")
        self.payload = {
            "name": "Spoke & Chain",
            "address": "1 Market St",
            "phone": "555-0100",
            "services": "repairs",
        }

    def test_owner_can_onboard_once(self):
        self.client.force_authenticate(self.owner)

        res = self.client.post("/api/shops/onboard/", self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(res.data["onboarding_complete"])

        again = self.client.post("/api/shops/onboard/", self.payload, format="json")
        self.assertEqual(again.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(again.data["error"]["code"], "SHOP_ALREADY_ONBOARDED")

    def test_non_owner_cannot_onboard(self):
        mechanic = User.objects.create_user(
            email="mech@example.com", password="pass", role="mechanic"
        )
        self.client.force_authenticate(mechanic)

        res = self.client.post("/api/shops/onboard/", self.payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_invalid_services_is_validation_error(self):
        self.client.force_authenticate(self.owner)

        res = self.client.post(
            "/api/shops/onboard/", {**self.payload, "services": "sales"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    @override_settings(GEOCODING=GEOCODING_ON)
    @mock.patch("shops.services.onboarding_service.geocode_address")
    def test_geocoder_failure_is_bad_gateway(self, geocode):
        geocode.side_effect = GeocodingError("Geocoding failed: OVER_QUERY_LIMIT - slow down")
        self.client.force_authenticate(self.owner)

        res = self.client.post("/api/shops/onboard/", self.payload, format="json")

        self.assertEqual(res.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(res.data["error"]["code"], "GEOCODING_FAILED")
        self.assertIn("OVER_QUERY_LIMIT", res.data["error"]["message"])


class ShopSettingsApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass")
        self.shop = _make_shop(self.owner)
        self.mechanic = User.objects.create_user(
            email="mech@example.com", password="pass", role="mechanic", shop=self.shop
        )

    # --------------------------------------------------
    # PROFILE
    # --------------------------------------------------

    def test_member_can_read_profile(self):
        self.client.force_authenticate(self.mechanic)

        res = self.client.get("/api/shops/profile/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["id"], str(self.shop.id))

    def test_user_without_shop_is_denied(self):
        stranger = User.objects.create_user(
            email="rider@example.com", password="pass", role="customer"
        )
        self.client.force_authenticate(stranger)

        res = self.client.get("/api/shops/profile/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_owner_can_update_profile(self):
        self.client.force_authenticate(self.owner)

        res = self.client.patch(
            "/api/shops/profile/",
            {"city": "Oakland", "promo_code": "SPRING"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.shop.refresh_from_db()
        self.assertEqual(self.shop.city, "Oakland")
        self.assertEqual(self.shop.promo_code, "SPRING")

    @override_settings(GEOCODING=GEOCODING_ON)
    def test_blank_address_is_bad_request(self):
        self.client.force_authenticate(self.owner)

        res = self.client.patch("/api/shops/profile/", {"address": ""}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["error"]["code"], "SHOP_INVALID")
        self.shop.refresh_from_db()
        self.assertEqual(self.shop.address, "1 Market St")

    def test_mechanic_cannot_update_profile(self):
        self.client.force_authenticate(self.mechanic)

        res = self.client.patch("/api/shops/profile/", {"city": "Oakland"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_coordinates_are_read_only(self):
        self.client.force_authenticate(self.owner)

        self.client.patch("/api/shops/profile/", {"geohash": "zzzzzzzzz"}, format="json")

        self.shop.refresh_from_db()
        self.assertEqual(self.shop.geohash, "")

    # --------------------------------------------------
    # AVAILABILITY
    # --------------------------------------------------

    def test_availability_defaults(self):
        self.client.force_authenticate(self.owner)

        res = self.client.get("/api/shops/availability/")

        self.assertEqual(
            res.data,
            {"availability": "Today", "drop_off": False, "valet_service": False},
        )

    def test_availability_update(self):
        self.client.force_authenticate(self.owner)

        res = self.client.patch(
            "/api/shops/availability/",
            {"availability": "Not Taking Orders", "valet_service": True},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["availability"], "Not Taking Orders")
        self.assertTrue(res.data["valet_service"])

    def test_unknown_availability_rejected(self):
        self.client.force_authenticate(self.owner)

        res = self.client.patch(
            "/api/shops/availability/", {"availability": "Tomorrow"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


class ShopOverviewApiTests(TestCase):
    """
    GUARANTEES:
    - Counts are scoped to the acting shop
    - Revenue only counts this shop's entries in the current month
    """

    def setUp(self):
        self.client = APIClient()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass")
        self.shop = _make_shop(self.owner)

        other_owner = User.objects.create_user(email="other@example.com", password="pass")
        self.other_shop = _make_shop(other_owner, name="Other Shop")

        rider = User.objects.create_user(email="rider@example.com", password="pass", role="customer")
        bike = Equipment.objects.create(owner=rider, name="Road", type="Road Bike")

        WorkOrder.objects.create(shop=self.shop, status="New")
        WorkOrder.objects.create(shop=self.shop, status="In Service")
        WorkOrder.objects.create(shop=self.shop, status="Completed")
        WorkOrder.objects.create(shop=self.other_shop, status="New")

        Employee.objects.create(shop=self.shop, name="A", email="a@example.com")
        Employee.objects.create(shop=self.shop, name="B", email="b@example.com")
        Employee.objects.create(shop=self.other_shop, name="C", email="c@example.com")

        today = date.today()
        MaintenanceLog.objects.create(
            equipment=bike, date=today, component_name="Chain",
            service_type="replaced", cost=Decimal("45.50"), shop=self.shop,
        )
        MaintenanceLog.objects.create(
            equipment=bike, date=today, component_name="Brake Pads",
            service_type="serviced", cost=Decimal("20.00"), shop=self.shop,
        )
        MaintenanceLog.objects.create(
            equipment=bike, date=today, component_name="Tire",
            service_type="replaced", cost=Decimal("99.00"), shop=self.other_shop,
        )
        last_year = today.replace(year=today.year - 1, day=1)
        MaintenanceLog.objects.create(
            equipment=bike, date=last_year, component_name="Cassette",
            service_type="replaced", cost=Decimal("80.00"), shop=self.shop,
        )

    def test_overview_counts(self):
        self.client.force_authenticate(self.owner)

        res = self.client.get("/api/shops/overview/")

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["open_work_orders"], 2)
        self.assertEqual(res.data["completed_this_month"], 1)
        self.assertEqual(res.data["team_members"], 2)
        self.assertEqual(Decimal(res.data["revenue_mtd"]), Decimal("65.50"))


class NearbyShopsApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.near = _make_shop(
            User.objects.create_user(email="a@example.com", password="pass"),
            name="Near Cycles",
            lat=57.64911,
            lng=10.40744,
        )
        self.far = _make_shop(
            User.objects.create_user(email="b@example.com", password="pass"),
            name="Far Cycles",
            lat=42.6,
            lng=-5.6,
        )
        self.pending = Shop.objects.create(
            owner=User.objects.create_user(email="c@example.com", password="pass"),
            name="Pending Cycles",
            lat=57.64911,
            lng=10.40744,
            geohash=geohash.encode(57.64911, 10.40744),
            onboarding_complete=False,
        )

    def test_public_search_by_prefix(self):
        res = self.client.get("/api/shops/nearby/", {"lat": 57.6491, "lng": 10.4074, "precision": 5})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        names = [s["name"] for s in res.data["results"]]
        self.assertEqual(names, ["Near Cycles"])
        self.assertNotIn("billing_email", res.data["results"][0])

    def test_invalid_query_rejected(self):
        res = self.client.get("/api/shops/nearby/", {"lat": 120, "lng": 0})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

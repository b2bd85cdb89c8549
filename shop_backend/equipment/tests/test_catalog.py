# equipment/tests/test_catalog.py

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from equipment.models import MasterComponent
from equipment.services.catalog_service import catalog_options

User = get_user_model()


class CatalogOptionsTests(TestCase):
    """
    GUARANTEES:
    - brands / sizes are always drawn from every entry with the component name
    - series narrow by brand + size, models by series as well
    """

    def setUp(self):
        MasterComponent.objects.create(name="Chain", system="Drivetrain", brand="Shimano", series="Ultegra", model="CN-M8100", size="12s")
        MasterComponent.objects.create(name="Chain", system="Drivetrain", brand="Shimano", series="105", model="CN-M7100", size="12s")
        MasterComponent.objects.create(name="Chain", system="Drivetrain", brand="SRAM", series="Red", model="Flattop", size="12s")
        MasterComponent.objects.create(name="Chain", system="Drivetrain", brand="KMC", series="X11", model="X11SL", size="11s")
        MasterComponent.objects.create(name="Cassette", system="Drivetrain", brand="Shimano", series="Ultegra")

    def test_unfiltered(self):
        options = catalog_options(component_name="chain")

        self.assertEqual(options.brands, ["KMC", "SRAM", "Shimano"])
        self.assertEqual(options.sizes, ["11s", "12s"])
        self.assertEqual(len(options.models), 4)

    def test_brand_narrows_series(self):
        options = catalog_options(component_name="Chain", brand="Shimano")

        self.assertEqual(options.series, ["105", "Ultegra"])
        self.assertEqual(options.brands, ["KMC", "SRAM", "Shimano"])

    def test_series_narrows_models(self):
        options = catalog_options(component_name="Chain", brand="Shimano", series="Ultegra")

        self.assertEqual([m.model for m in options.models], ["CN-M8100"])


class CatalogApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(
            User.objects.create_user(email="rider@example.com", password="pass", role="customer")
        )
        call_command("seed_master_components", verbosity=0)

    def test_list_filters_by_system(self):
        res = self.client.get("/api/equipment/catalog/", {"system": "Drivetrain"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["results"])
        self.assertTrue(all(row["system"] == "Drivetrain" for row in res.data["results"]))

    def test_options_endpoint(self):
        res = self.client.get("/api/equipment/catalog/options/", {"component_name": "Chain"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn("Shimano", res.data["brands"])

    def test_options_requires_component_name(self):
        res = self.client.get("/api/equipment/catalog/options/")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_seed_is_idempotent(self):
        before = MasterComponent.objects.count()
        call_command("seed_master_components", verbosity=0)
        self.assertEqual(MasterComponent.objects.count(), before)

    def test_anonymous_rejected(self):
        self.client.force_authenticate(None)
        res = self.client.get("/api/equipment/catalog/")
        self.assertIn(res.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

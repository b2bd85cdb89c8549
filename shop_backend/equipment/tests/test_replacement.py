# equipment/tests/test_replacement.py

import uuid
from datetime import date

from django.contrib.auth import get_user_model
from django.test import TestCase

from equipment.models import Equipment, MaintenanceLog, MasterComponent, UserComponent
from equipment.services.exceptions import (
    CatalogEntryNotFoundError,
    ComponentNotFoundError,
    ReplacementError,
)
from equipment.services.replacement_service import (
    ManualPart,
    delete_user_component,
    replace_component,
)
from shops.models import Shop

User = get_user_model()


class ReplaceComponentTests(TestCase):
    """
    GUARANTEES:
    - The old component is deactivated (kept for history), never deleted
    - The new component starts with zero wear and today's purchase date
    - Sub-components move under the new component
    - A "replaced" maintenance entry is appended
    """

    def setUp(self):
        self.rider = User.objects.create_user(email="rider@example.com", password="pass", role="customer")
        owner = User.objects.create_user(email="owner@example.com", password="pass")
        self.shop = Shop.objects.create(owner=owner, name="Spoke & Chain")
        self.bike = Equipment.objects.create(owner=self.rider, name="Race bike", type="Road Bike")

        self.caliper = MasterComponent.objects.create(name="Brake Caliper", system="Disc Brakes", brand="Shimano")
        self.better_caliper = MasterComponent.objects.create(
            name="Brake Caliper", system="Disc Brakes", brand="SRAM", model="Red AXS"
        )
        self.pads = MasterComponent.objects.create(name="Brake Pads", system="Disc Brakes", brand="Shimano")

        self.old = UserComponent.objects.create(
            equipment=self.bike,
            master_component_id=self.caliper.id,
            wear_percentage=70.0,
            total_distance=3200.0,
        )
        self.sub = UserComponent.objects.create(
            equipment=self.bike,
            master_component_id=self.pads.id,
            parent=self.old,
        )

    # --------------------------------------------------
    # CATALOG PATH
    # --------------------------------------------------

    def test_replace_with_catalog_entry(self):
        result = replace_component(
            equipment=self.bike,
            user_component_id=self.old.id,
            reason="upgrade",
            new_master_component_id=self.better_caliper.id,
            shop=self.shop,
        )

        self.old.refresh_from_db()
        self.assertFalse(self.old.is_active)
        self.assertEqual(self.old.replacement_reason, "upgrade")
        self.assertIsNotNone(self.old.replaced_at)

        new = result.new_component
        self.assertEqual(new.master_component_id, self.better_caliper.id)
        self.assertEqual(new.wear_percentage, 0.0)
        self.assertEqual(new.total_distance, 0.0)
        self.assertEqual(new.purchase_date, date.today())
        self.assertEqual(result.message, "Brake Caliper has been replaced.")

    def test_sub_components_move_to_new_component(self):
        result = replace_component(
            equipment=self.bike,
            user_component_id=self.old.id,
            reason="failure",
            new_master_component_id=self.better_caliper.id,
        )

        self.sub.refresh_from_db()
        self.assertEqual(self.sub.parent_id, result.new_component.id)

    def test_maintenance_entry_is_stamped_with_shop(self):
        replace_component(
            equipment=self.bike,
            user_component_id=self.old.id,
            reason="failure",
            new_master_component_id=self.better_caliper.id,
            shop=self.shop,
        )

        entry = MaintenanceLog.objects.get(equipment=self.bike)
        self.assertEqual(entry.service_type, MaintenanceLog.ServiceType.REPLACED)
        self.assertEqual(entry.component_name, "Brake Caliper")
        self.assertEqual(entry.shop_name, "Spoke & Chain")

    def test_unknown_catalog_entry(self):
        with self.assertRaises(CatalogEntryNotFoundError):
            replace_component(
                equipment=self.bike,
                user_component_id=self.old.id,
                reason="upgrade",
                new_master_component_id=uuid.uuid4(),
            )

        self.old.refresh_from_db()
        self.assertTrue(self.old.is_active)

    # --------------------------------------------------
    # MANUAL PATH
    # --------------------------------------------------

    def test_manual_part_creates_catalog_entry(self):
        result = replace_component(
            equipment=self.bike,
            user_component_id=self.old.id,
            reason="modification",
            manual=ManualPart(brand=" TRP ", model="EVO", size="160mm"),
        )

        master = result.master_component
        self.assertEqual(master.name, "Brake Caliper")
        self.assertEqual(master.system, "Disc Brakes")
        self.assertEqual(master.brand, "TRP")
        self.assertEqual(result.new_component.size, "160mm")
        self.assertTrue(MasterComponent.objects.filter(id=master.id).exists())

    def test_manual_part_requires_brand(self):
        with self.assertRaises(ReplacementError):
            replace_component(
                equipment=self.bike,
                user_component_id=self.old.id,
                reason="upgrade",
                manual=ManualPart(brand="  "),
            )

    def test_neither_catalog_nor_manual(self):
        with self.assertRaises(ReplacementError):
            replace_component(equipment=self.bike, user_component_id=self.old.id, reason="upgrade")

    def test_manual_part_needs_old_catalog_entry(self):
        orphan = UserComponent.objects.create(equipment=self.bike, master_component_id=uuid.uuid4())

        with self.assertRaises(ReplacementError):
            replace_component(
                equipment=self.bike,
                user_component_id=orphan.id,
                reason="upgrade",
                manual=ManualPart(brand="TRP"),
            )

    # --------------------------------------------------
    # VALIDATION
    # --------------------------------------------------

    def test_invalid_reason(self):
        with self.assertRaises(ReplacementError):
            replace_component(
                equipment=self.bike,
                user_component_id=self.old.id,
                reason="boredom",
                new_master_component_id=self.better_caliper.id,
            )

    def test_already_replaced_component_not_found(self):
        replace_component(
            equipment=self.bike,
            user_component_id=self.old.id,
            reason="upgrade",
            new_master_component_id=self.better_caliper.id,
        )

        with self.assertRaises(ComponentNotFoundError):
            replace_component(
                equipment=self.bike,
                user_component_id=self.old.id,
                reason="upgrade",
                new_master_component_id=self.better_caliper.id,
            )


class DeleteUserComponentTests(TestCase):
    def setUp(self):
        rider = User.objects.create_user(email="rider@example.com", password="pass", role="customer")
        self.bike = Equipment.objects.create(owner=rider, name="Race bike", type="Road Bike")
        self.component = UserComponent.objects.create(equipment=self.bike, master_component_id=uuid.uuid4())

    def test_delete(self):
        delete_user_component(equipment=self.bike, user_component_id=self.component.id)
        self.assertFalse(UserComponent.objects.filter(id=self.component.id).exists())

    def test_delete_unknown(self):
        with self.assertRaises(ComponentNotFoundError):
            delete_user_component(equipment=self.bike, user_component_id=uuid.uuid4())

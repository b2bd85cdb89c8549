# equipment/tests/test_component_join.py

import uuid

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings

from equipment.models import Equipment, MasterComponent, UserComponent
from equipment.services.component_join import (
    chunked,
    filter_by_system,
    load_master_components,
    resolve_component_with_children,
    resolve_equipment_components,
    system_title,
    top_worn,
    unique_ids,
)
from equipment.services.exceptions import ComponentNotFoundError

User = get_user_model()


class ComponentJoinTestBase(TestCase):
    def setUp(self):
        self.rider = User.objects.create_user(email="rider@example.com", password="pass", role="customer")
        self.bike = Equipment.objects.create(owner=self.rider, name="Race bike", type="Road Bike")

        self.chain = MasterComponent.objects.create(
            name="Chain", system="Drivetrain", brand="Shimano", series="Ultegra", model="CN-M8100"
        )
        self.caliper = MasterComponent.objects.create(
            name="Brake Caliper", system="Disc Brakes", brand="Shimano", model="BR-R8170"
        )
        self.pads = MasterComponent.objects.create(
            name="Brake Pads", system="Disc Brakes", brand="Shimano", model="L05A", size="Standard"
        )
        self.rim_pads = MasterComponent.objects.create(name="Rim Pads", system="Rim Brakes", brand="SwissStop")

    def fit(self, master, **extra):
        return UserComponent.objects.create(
            equipment=self.bike,
            master_component_id=master.id if master is not None else None,
            **extra,
        )


class MasterLookupBatchingTests(ComponentJoinTestBase):
    """
    GUARANTEES:
    - Ids are de-duplicated and falsy ids dropped before querying
    - At most 30 ids go into one catalog query
    - Missing catalog rows are simply absent from the result
    """

    def test_unique_ids_keeps_first_seen_order(self):
        a, b = uuid.uuid4(), uuid.uuid4()
        self.assertEqual(unique_ids([a, None, b, str(a), ""]), [str(a), str(b)])

    def test_chunked_rejects_non_positive_size(self):
        with self.assertRaises(ValueError):
            list(chunked([1, 2], 0))

    def test_empty_ids_do_not_query(self):
        with self.assertNumQueries(0):
            self.assertEqual(load_master_components([None, ""]), {})

    def test_sixty_one_ids_take_three_queries(self):
        ids = [uuid.uuid4() for _ in range(60)] + [self.chain.id]

        with self.assertNumQueries(3):
            found = load_master_components(ids)

        self.assertEqual(list(found), [str(self.chain.id)])

    def test_thirty_ids_take_one_query(self):
        ids = [uuid.uuid4() for _ in range(29)] + [self.chain.id]

        with self.assertNumQueries(1):
            load_master_components(ids)

    def test_duplicates_count_once(self):
        ids = [self.chain.id] * 45

        with self.assertNumQueries(1):
            found = load_master_components(ids)

        self.assertEqual(len(found), 1)

    @override_settings(MASTER_COMPONENT_LOOKUP_BATCH_SIZE=10)
    def test_batch_size_is_configurable(self):
        ids = [uuid.uuid4() for _ in range(25)]

        with self.assertNumQueries(3):
            load_master_components(ids)


class ResolveComponentsTests(ComponentJoinTestBase):
    """
    GUARANTEES:
    - User-instance fields override catalog fields
    - Components with missing catalog rows are skipped, not fatal
    - Inactive (replaced) components are not listed
    """

    def test_merge_prefers_user_fields(self):
        uc = self.fit(self.pads, size="Large", wear_percentage=40.0, notes="squeal")

        [resolved] = resolve_equipment_components(self.bike)

        self.assertEqual(resolved.id, str(uc.id))
        self.assertEqual(resolved.master_component_id, str(self.pads.id))
        self.assertEqual(resolved.component_name, "Brake Pads")
        self.assertEqual(resolved.component_group, "Disc Brakes")
        self.assertEqual(resolved.size, "Large")
        self.assertEqual(resolved.wear_percentage, 40.0)
        self.assertEqual(resolved.notes, "squeal")

    def test_size_falls_back_to_catalog(self):
        self.fit(self.pads)

        [resolved] = resolve_equipment_components(self.bike)
        self.assertEqual(resolved.size, "Standard")

    def test_missing_master_is_skipped(self):
        self.fit(self.chain)
        UserComponent.objects.create(equipment=self.bike, master_component_id=uuid.uuid4())
        self.fit(None)

        resolved = resolve_equipment_components(self.bike)

        self.assertEqual([c.component_name for c in resolved], ["Chain"])

    def test_inactive_components_hidden(self):
        self.fit(self.chain, is_active=False)
        self.assertEqual(resolve_equipment_components(self.bike), [])

    def test_top_worn_returns_three_highest(self):
        for wear in (10.0, 80.0, 55.0, 95.0):
            self.fit(self.chain, wear_percentage=wear)

        top = top_worn(resolve_equipment_components(self.bike), 3)

        self.assertEqual([c.wear_percentage for c in top], [95.0, 80.0, 55.0])


class ComponentWithChildrenTests(ComponentJoinTestBase):
    """
    GUARANTEES:
    - Main component and sub-components share ONE catalog lookup
    - A main component without a catalog row is reported as None
    - Unknown component ids raise ComponentNotFoundError
    """

    def test_children_resolved_with_single_lookup(self):
        main = self.fit(self.caliper)
        self.fit(self.pads, parent=main)
        self.fit(self.pads, parent=main)

        # main row, sub-components, catalog batch
        with self.assertNumQueries(3):
            result = resolve_component_with_children(self.bike, main.id)

        self.assertEqual(result.component.component_name, "Brake Caliper")
        self.assertEqual(len(result.sub_components), 2)
        self.assertTrue(all(s.parent_user_component_id == str(main.id) for s in result.sub_components))

    def test_main_without_master_is_none(self):
        main = UserComponent.objects.create(equipment=self.bike, master_component_id=uuid.uuid4())
        self.fit(self.pads, parent=main)

        result = resolve_component_with_children(self.bike, main.id)

        self.assertIsNone(result.component)
        self.assertEqual(len(result.sub_components), 1)

    def test_unknown_component(self):
        with self.assertRaises(ComponentNotFoundError):
            resolve_component_with_children(self.bike, uuid.uuid4())

    def test_component_of_other_equipment_not_found(self):
        other = Equipment.objects.create(owner=self.rider, name="Commuter", type="Hybrid Bike")
        foreign = UserComponent.objects.create(equipment=other, master_component_id=self.chain.id)

        with self.assertRaises(ComponentNotFoundError):
            resolve_component_with_children(self.bike, foreign.id)


class SystemFilterTests(ComponentJoinTestBase):
    def test_brakes_gathers_every_brake_group(self):
        self.fit(self.chain)
        self.fit(self.caliper)
        self.fit(self.rim_pads)

        names = [c.component_name for c in filter_by_system(resolve_equipment_components(self.bike), "brakes")]

        self.assertEqual(sorted(names), ["Brake Caliper", "Rim Pads"])

    def test_other_systems_match_exactly(self):
        self.fit(self.chain)
        self.fit(self.caliper)

        names = [c.component_name for c in filter_by_system(resolve_equipment_components(self.bike), "drivetrain")]
        self.assertEqual(names, ["Chain"])

    def test_disc_brakes_slug(self):
        self.fit(self.caliper)
        self.fit(self.rim_pads)

        names = [c.component_name for c in filter_by_system(resolve_equipment_components(self.bike), "disc-brakes")]
        self.assertEqual(names, ["Brake Caliper"])

    def test_system_title(self):
        self.assertEqual(system_title("e-bike"), "E-Bike")
        self.assertEqual(system_title("disc-brakes"), "Disc Brakes")
        self.assertEqual(system_title("drivetrain"), "Drivetrain")

    def test_ebike_slug_matches_hyphenated_group(self):
        motor = MasterComponent.objects.create(name="Motor", system="E-Bike", brand="Bosch")
        self.fit(motor)

        names = [c.component_name for c in filter_by_system(resolve_equipment_components(self.bike), "e-bike")]
        self.assertEqual(names, ["Motor"])

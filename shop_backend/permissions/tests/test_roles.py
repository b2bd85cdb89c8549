# permissions/tests/test_roles.py

from types import SimpleNamespace

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIRequestFactory

from permissions.roles import (
    CAP_EMPLOYEES_MANAGE,
    CAP_EQUIPMENT_EDIT,
    CAP_SHOP_CONFIGURE,
    CAP_WORKORDERS_EDIT,
    CAP_WORKORDERS_VIEW,
    HasAnyCapability,
    HasCapability,
    IsOwner,
    IsShopMember,
    effective_capabilities_for,
)

User = get_user_model()


class RoleCapabilityTests(TestCase):
    """
    Role -> capability map.

    GUARANTEES:
    - Owners and admins hold every capability
    - Staff can work orders but cannot edit equipment or manage the shop
    - Customers never see shop-side work order data
    """

    def _user(self, role, **extra):
        return User.objects.create_user(email=f"{role}@example.com", password="pass", role=role, **extra)

    def test_owner_has_everything(self):
        caps = effective_capabilities_for(self._user("owner"))
        self.assertIn(CAP_SHOP_CONFIGURE, caps)
        self.assertIn(CAP_EMPLOYEES_MANAGE, caps)

    def test_mechanic(self):
        caps = effective_capabilities_for(self._user("mechanic"))
        self.assertIn(CAP_WORKORDERS_EDIT, caps)
        self.assertIn(CAP_EQUIPMENT_EDIT, caps)
        self.assertNotIn(CAP_EMPLOYEES_MANAGE, caps)

    def test_staff(self):
        caps = effective_capabilities_for(self._user("staff"))
        self.assertIn(CAP_WORKORDERS_EDIT, caps)
        self.assertNotIn(CAP_EQUIPMENT_EDIT, caps)
        self.assertNotIn(CAP_SHOP_CONFIGURE, caps)

    def test_customer(self):
        caps = effective_capabilities_for(self._user("customer"))
        self.assertNotIn(CAP_WORKORDERS_VIEW, caps)

    def test_superuser_has_everything(self):
        admin = User.objects.create_superuser(email="root@example.com", password="pass")
        self.assertIn(CAP_EMPLOYEES_MANAGE, effective_capabilities_for(admin))


class CapabilityPermissionTests(TestCase):
    """
    GUARANTEES:
    - HasCapability denies by default when a view declares nothing
    - HasAnyCapability passes on any one match
    """

    def setUp(self):
        self.factory = APIRequestFactory()
        self.staff = User.objects.create_user(email="staff@example.com", password="pass", role="staff")

    def _request(self, user):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_capability_granted(self):
        view = SimpleNamespace(required_capability=CAP_WORKORDERS_VIEW)
        self.assertTrue(HasCapability().has_permission(self._request(self.staff), view))

    def test_capability_denied(self):
        view = SimpleNamespace(required_capability=CAP_SHOP_CONFIGURE)
        self.assertFalse(HasCapability().has_permission(self._request(self.staff), view))

    def test_no_declared_capability_denies(self):
        view = SimpleNamespace(required_capability=None)
        self.assertFalse(HasCapability().has_permission(self._request(self.staff), view))

    def test_any_capability(self):
        view = SimpleNamespace(required_any_capabilities={CAP_SHOP_CONFIGURE, CAP_WORKORDERS_VIEW})
        self.assertTrue(HasAnyCapability().has_permission(self._request(self.staff), view))

    def test_role_permissions(self):
        request = self._request(self.staff)
        self.assertTrue(IsShopMember().has_permission(request, None))
        self.assertFalse(IsOwner().has_permission(request, None))

# shops/tests/test_tenancy.py

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.exceptions import PermissionDenied
from rest_framework.test import APIRequestFactory

from shops.models import Shop
from shops.tenancy import get_request_shop, shop_for_user

User = get_user_model()


class TenancyTests(TestCase):
    """
    GUARANTEES:
    - Owners act for the shop they own
    - Staff logins act for the shop they belong to
    - Inactive shops and shop-less users resolve to nothing
    """

    def setUp(self):
        self.factory = APIRequestFactory()
        self.owner = User.objects.create_user(email="owner@example.com", password="pass")
        self.shop = Shop.objects.create(owner=self.owner, name="Spoke & Chain")

    def _request_for(self, user):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_owner_resolves_owned_shop(self):
        self.assertEqual(shop_for_user(self.owner), self.shop)

    def test_member_resolves_membership(self):
        staff = User.objects.create_user(
            email="staff@example.com", password="pass", role="staff", shop=self.shop
        )
        self.assertEqual(shop_for_user(staff), self.shop)

    def test_inactive_membership_ignored(self):
        staff = User.objects.create_user(
            email="staff@example.com", password="pass", role="staff", shop=self.shop
        )
        self.shop.is_active = False
        self.shop.save(update_fields=["is_active"])
        staff.refresh_from_db()

        self.assertIsNone(shop_for_user(staff))

    def test_inactive_owned_shop_ignored(self):
        self.shop.is_active = False
        self.shop.save(update_fields=["is_active"])
        self.owner.refresh_from_db()

        self.assertIsNone(shop_for_user(self.owner))
        with self.assertRaises(PermissionDenied):
            get_request_shop(self._request_for(self.owner))

    def test_customer_has_no_shop(self):
        rider = User.objects.create_user(email="rider@example.com", password="pass", role="customer")
        self.assertIsNone(shop_for_user(rider))

        with self.assertRaises(PermissionDenied):
            get_request_shop(self._request_for(rider))

    def test_request_shop_is_cached(self):
        request = self._request_for(self.owner)

        self.assertEqual(get_request_shop(request), self.shop)
        self.assertIs(request._shop, get_request_shop(request))

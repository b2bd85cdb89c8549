# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS
# =========================================================
# Shop-side roles describe what a login does inside a shop.
# "customer" is the rider whose equipment the shop services.
ROLE_OWNER = "owner"
ROLE_ADMIN = "admin"
ROLE_MECHANIC = "mechanic"
ROLE_STAFF = "staff"
ROLE_CUSTOMER = "customer"

SHOP_ROLES = {
    ROLE_OWNER,
    ROLE_ADMIN,
    ROLE_MECHANIC,
    ROLE_STAFF,
}

ALL_ROLES = SHOP_ROLES | {ROLE_CUSTOMER}


# =========================================================
# CAPABILITIES (THE REAL PERMISSION LANGUAGE)
# =========================================================
# Views protect capabilities, not raw roles.
CAP_SHOP_CONFIGURE = "shop.configure"

CAP_WORKORDERS_VIEW = "workorders.view"
CAP_WORKORDERS_EDIT = "workorders.edit"

CAP_EQUIPMENT_VIEW = "equipment.view"
CAP_EQUIPMENT_EDIT = "equipment.edit"

CAP_EMPLOYEES_MANAGE = "employees.manage"

CAP_CATALOG_VIEW = "catalog.view"

ALL_CAPABILITIES = {
    CAP_SHOP_CONFIGURE,
    CAP_WORKORDERS_VIEW,
    CAP_WORKORDERS_EDIT,
    CAP_EQUIPMENT_VIEW,
    CAP_EQUIPMENT_EDIT,
    CAP_EMPLOYEES_MANAGE,
    CAP_CATALOG_VIEW,
}


# =========================================================
# ROLE → CAPABILITY MAP (DEFAULT)
# =========================================================
ROLE_CAPABILITIES: dict[str, set[str]] = {
    ROLE_OWNER: {
        *ALL_CAPABILITIES,
    },
    ROLE_ADMIN: {
        *ALL_CAPABILITIES,
    },
    ROLE_MECHANIC: {
        CAP_WORKORDERS_VIEW,
        CAP_WORKORDERS_EDIT,
        CAP_EQUIPMENT_VIEW,
        CAP_EQUIPMENT_EDIT,
        CAP_CATALOG_VIEW,
    },
    ROLE_STAFF: {
        CAP_WORKORDERS_VIEW,
        CAP_WORKORDERS_EDIT,
        CAP_EQUIPMENT_VIEW,
        CAP_CATALOG_VIEW,
    },
    # Customers reach their own equipment; object-level rules apply.
    ROLE_CUSTOMER: {
        CAP_EQUIPMENT_VIEW,
        CAP_EQUIPMENT_EDIT,
        CAP_CATALOG_VIEW,
    },
}


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def effective_capabilities_for(user) -> set[str]:
    if getattr(user, "is_superuser", False):
        return set(ALL_CAPABILITIES)
    return set(ROLE_CAPABILITIES.get(get_user_role(user), set()))


def is_shop_user(user) -> bool:
    return get_user_role(user) in SHOP_ROLES


# =========================================================
# Base Role Permission (Internal Use)
# =========================================================
class BaseRolePermission(BasePermission):
    """
    Base permission for role-based access control.

    Subclasses must define:
    - allowed_roles (set)
    """

    allowed_roles: set[str] = set()

    def has_permission(self, request, view):
        user = request.user

        if not user or not user.is_authenticated:
            return False

        user_role = get_user_role(user)
        if not user_role:
            return False

        return user_role in self.allowed_roles


# =========================================================
# Capability Permissions
# =========================================================
class HasCapability(BasePermission):
    """
    Require a specific capability.

    Usage:
        permission_classes = [IsAuthenticated, HasCapability]
        view.required_capability = CAP_WORKORDERS_EDIT
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_capability", None)
        if not required:
            # deny-by-default
            return False

        return required in effective_capabilities_for(user)


class HasAnyCapability(BasePermission):
    """
    Require ANY capability from a set.

    Usage:
        view.required_any_capabilities = {CAP_WORKORDERS_VIEW, CAP_EQUIPMENT_VIEW}
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_any_capabilities", None)
        if not required:
            return False

        caps = effective_capabilities_for(user)
        return any(cap in caps for cap in set(required))


# =========================================================
# Role Permissions
# =========================================================
class IsOwner(BaseRolePermission):
    allowed_roles = {ROLE_OWNER}


class IsOwnerOrAdmin(BaseRolePermission):
    allowed_roles = {ROLE_OWNER, ROLE_ADMIN}


class IsMechanic(BaseRolePermission):
    allowed_roles = {ROLE_MECHANIC}


class IsShopMember(BaseRolePermission):
    allowed_roles = SHOP_ROLES


class IsCustomer(BaseRolePermission):
    allowed_roles = {ROLE_CUSTOMER}

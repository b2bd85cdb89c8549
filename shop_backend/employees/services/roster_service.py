# employees/services/roster_service.py

"""
EMPLOYEE ROSTER SERVICE

Rules:
- Emails are stored lower-cased and are unique per shop.
- New employees always join as Staff; promotion is a separate role update.
"""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from employees.models import Employee
from employees.services.exceptions import DuplicateEmployeeError, InvalidEmployeeRoleError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def add_employee(*, shop, name: str, email: str) -> Employee:
    email = normalize_email(email)

    if Employee.objects.filter(shop=shop, email=email).exists():
        raise DuplicateEmployeeError("An employee with this email already exists.")

    try:
        with transaction.atomic():
            employee = Employee.objects.create(
                shop=shop,
                name=(name or "").strip(),
                email=email,
                role=Employee.Role.STAFF,
            )
    except IntegrityError as exc:
        raise DuplicateEmployeeError("An employee with this email already exists.") from exc

    logger.info(
        "Employee added",
        extra={"shop_id": str(shop.id), "employee_id": str(employee.id)},
    )
    return employee


def update_employee_role(*, employee: Employee, role: str) -> Employee:
    if role not in Employee.Role.values:
        raise InvalidEmployeeRoleError(f"Invalid role: {role}")

    employee.role = role
    employee.save(update_fields=["role", "updated_at"])
    return employee

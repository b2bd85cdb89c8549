# employees/models/employee.py

import uuid

from django.db import models


class Employee(models.Model):
    """
    A shop team member record (roster entry, not a login).

    New employees always start as Staff; role is promoted afterwards.
    """

    class Role(models.TextChoices):
        ADMIN = "Admin", "Admin"
        MECHANIC = "Mechanic", "Mechanic"
        STAFF = "Staff", "Staff"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    shop = models.ForeignKey(
        "shops.Shop",
        on_delete=models.CASCADE,
        related_name="employees",
    )

    name = models.CharField(max_length=255)
    email = models.EmailField()
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.STAFF)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["shop", "email"],
                name="uniq_employee_email_per_shop",
            ),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.role})"

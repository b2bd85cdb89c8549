# employees/filters.py

import django_filters

from employees.models import Employee


class EmployeeFilter(django_filters.FilterSet):
    # incremental feed: rows changed after the client's last sync
    updated_after = django_filters.IsoDateTimeFilter(field_name="updated_at", lookup_expr="gt")

    class Meta:
        model = Employee
        fields = ["role", "updated_after"]

# work_orders/filters.py

import django_filters

from work_orders.models import WorkOrder
from work_orders.services.status_service import stored_status_q


class WorkOrderFilter(django_filters.FilterSet):
    # matches the reported (normalized) status, so legacy rows show under "New"
    status = django_filters.ChoiceFilter(choices=WorkOrder.Status.choices, method="filter_status")
    # incremental feed: rows changed after the client's last sync
    updated_after = django_filters.IsoDateTimeFilter(field_name="updated_at", lookup_expr="gt")
    customer = django_filters.UUIDFilter(field_name="customer_id")
    equipment = django_filters.UUIDFilter(field_name="equipment_id")

    class Meta:
        model = WorkOrder
        fields = ["status", "priority", "updated_after", "customer", "equipment"]

    def filter_status(self, queryset, name, value):
        return queryset.filter(stored_status_q(value))

# work_orders/admin.py

from django.contrib import admin

from work_orders.models import WorkOrder


@admin.register(WorkOrder)
class WorkOrderAdmin(admin.ModelAdmin):
    list_display = (
        "short_id",
        "shop",
        "customer_name",
        "equipment_name",
        "status",
        "priority",
        "created_at",
    )
    readonly_fields = (
        "customer_name",
        "customer_email",
        "customer_phone",
        "equipment_name",
        "equipment_brand",
        "equipment_model",
        "created_at",
        "updated_at",
    )
    search_fields = ("customer_name", "customer_email", "service_type", "shop__name")
    list_filter = ("status", "priority")

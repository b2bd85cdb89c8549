# equipment/admin.py

from django.contrib import admin

from equipment.models import Equipment, MaintenanceLog, MasterComponent, UserComponent


# ======================================================
# EQUIPMENT
# ======================================================


@admin.register(Equipment)
class EquipmentAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "brand", "model", "owner", "total_distance", "updated_at")
    search_fields = ("name", "brand", "model", "owner__email")
    list_filter = ("type",)
    filter_horizontal = ("associated_equipment",)


# ======================================================
# COMPONENTS
# ======================================================


@admin.register(MasterComponent)
class MasterComponentAdmin(admin.ModelAdmin):
    list_display = ("name", "system", "brand", "series", "model", "size")
    search_fields = ("name", "brand", "series", "model")
    list_filter = ("system", "brand")


@admin.register(UserComponent)
class UserComponentAdmin(admin.ModelAdmin):
    list_display = ("id", "equipment", "master_component_id", "wear_percentage", "is_active")
    readonly_fields = ("replaced_at", "replacement_reason", "created_at", "updated_at")
    list_filter = ("is_active", "replacement_reason")


# ======================================================
# SERVICE HISTORY
# ======================================================


@admin.register(MaintenanceLog)
class MaintenanceLogAdmin(admin.ModelAdmin):
    list_display = ("date", "component_name", "service_type", "equipment", "shop_name", "cost")
    search_fields = ("component_name", "equipment__name", "shop_name")
    list_filter = ("service_type",)

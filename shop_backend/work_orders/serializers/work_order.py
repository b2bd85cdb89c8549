# work_orders/serializers/work_order.py

from rest_framework import serializers

from equipment.models import Equipment
from work_orders.models import WorkOrder
from work_orders.services.status_service import normalize_status


class WorkOrderSerializer(serializers.ModelSerializer):
    """
    Work order list/read shape.

    status is always reported normalized (legacy values read as "New").
    """

    short_id = serializers.CharField(read_only=True)
    display_customer_name = serializers.CharField(read_only=True)
    bike = serializers.CharField(read_only=True)
    issue_description = serializers.CharField(read_only=True)
    status = serializers.SerializerMethodField()

    class Meta:
        model = WorkOrder
        fields = [
            "id",
            "short_id",
            "shop",
            "customer",
            "customer_name",
            "customer_email",
            "customer_phone",
            "display_customer_name",
            "equipment",
            "equipment_name",
            "equipment_brand",
            "equipment_model",
            "bike",
            "service_type",
            "issue_description",
            "notes",
            "internal_notes",
            "status",
            "priority",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_status(self, obj) -> str:
        return normalize_status(obj.status)


class LinkedEquipmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Equipment
        fields = [
            "id",
            "name",
            "type",
            "brand",
            "model",
            "frame_size",
            "size",
            "total_distance",
            "total_hours",
            "fit_data",
        ]
        read_only_fields = fields


class WorkOrderDetailSerializer(WorkOrderSerializer):
    equipment_detail = LinkedEquipmentSerializer(source="equipment", read_only=True)

    class Meta(WorkOrderSerializer.Meta):
        fields = [*WorkOrderSerializer.Meta.fields, "equipment_detail"]
        read_only_fields = fields


class WorkOrderCreateSerializer(serializers.Serializer):
    customer = serializers.UUIDField(required=False, allow_null=True)
    equipment = serializers.UUIDField(required=False, allow_null=True)
    customer_name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    customer_email = serializers.EmailField(required=False, allow_blank=True)
    customer_phone = serializers.CharField(required=False, allow_blank=True, max_length=50)
    service_type = serializers.CharField(required=False, allow_blank=True, max_length=255)
    notes = serializers.CharField(required=False, allow_blank=True)
    internal_notes = serializers.CharField(required=False, allow_blank=True)


class WorkOrderNotesSerializer(serializers.ModelSerializer):
    class Meta:
        model = WorkOrder
        fields = ["notes", "internal_notes", "service_type"]


class WorkOrderStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class ServiceRequestSerializer(serializers.Serializer):
    shop = serializers.UUIDField()
    service_type = serializers.CharField(required=False, allow_blank=True, max_length=255)
    notes = serializers.CharField(required=False, allow_blank=True)


class CustomerWorkOrderSerializer(serializers.ModelSerializer):
    """Rider-facing view of a work order (no internal notes)."""

    short_id = serializers.CharField(read_only=True)
    status = serializers.SerializerMethodField()

    class Meta:
        model = WorkOrder
        fields = [
            "id",
            "short_id",
            "shop",
            "equipment",
            "service_type",
            "notes",
            "status",
            "created_at",
        ]
        read_only_fields = fields

    def get_status(self, obj) -> str:
        return normalize_status(obj.status)

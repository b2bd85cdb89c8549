# equipment/serializers/maintenance_log.py

from rest_framework import serializers

from equipment.models import MaintenanceLog


class MaintenanceLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = MaintenanceLog
        fields = [
            "id",
            "date",
            "component_name",
            "service_type",
            "notes",
            "cost",
            "shop",
            "shop_name",
            "created_at",
        ]
        read_only_fields = fields


class MaintenanceLogCreateSerializer(serializers.Serializer):
    date = serializers.DateField(required=False)
    component_name = serializers.CharField(max_length=120)
    service_type = serializers.ChoiceField(choices=MaintenanceLog.ServiceType.choices)
    notes = serializers.CharField(required=False, allow_blank=True)
    cost = serializers.DecimalField(
        required=False,
        allow_null=True,
        max_digits=10,
        decimal_places=2,
        min_value=0,
    )

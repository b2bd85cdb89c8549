# equipment/serializers/detail.py

from rest_framework import serializers

from equipment.serializers.component import ResolvedComponentSerializer
from equipment.serializers.equipment import EquipmentSerializer, EquipmentSummarySerializer
from equipment.serializers.maintenance_log import MaintenanceLogSerializer


class EquipmentDetailSerializer(serializers.Serializer):
    """
    Equipment page: the asset, its fitted parts, wear ranking and history.
    """

    equipment = EquipmentSerializer()
    components = ResolvedComponentSerializer(many=True)
    top_components = ResolvedComponentSerializer(many=True)
    maintenance_log = MaintenanceLogSerializer(many=True)
    systems = serializers.ListField(child=serializers.CharField())
    associated_shoes = EquipmentSummarySerializer(many=True)

# equipment/serializers/component.py

from rest_framework import serializers

from equipment.models import MasterComponent, UserComponent


class MasterComponentSerializer(serializers.ModelSerializer):
    class Meta:
        model = MasterComponent
        fields = [
            "id",
            "name",
            "system",
            "brand",
            "series",
            "model",
            "size",
            "lifespan_hours",
            "lifespan_distance",
        ]
        read_only_fields = fields


class ResolvedComponentSerializer(serializers.Serializer):
    """
    A user component merged with its catalog entry (read-only).
    """

    id = serializers.CharField()
    master_component_id = serializers.CharField()
    component_name = serializers.CharField()
    component_group = serializers.CharField()
    brand = serializers.CharField()
    series = serializers.CharField()
    model = serializers.CharField()
    size = serializers.CharField()
    lifespan_hours = serializers.IntegerField(allow_null=True)
    lifespan_distance = serializers.IntegerField(allow_null=True)
    purchase_date = serializers.DateField(allow_null=True)
    last_service_date = serializers.DateField(allow_null=True)
    total_distance = serializers.FloatField()
    total_hours = serializers.FloatField()
    wear_percentage = serializers.FloatField()
    notes = serializers.CharField()
    parent_user_component_id = serializers.CharField(allow_null=True)


class ComponentWithChildrenSerializer(serializers.Serializer):
    component = ResolvedComponentSerializer(allow_null=True)
    sub_components = ResolvedComponentSerializer(many=True)


class SystemComponentsSerializer(serializers.Serializer):
    system = serializers.CharField()
    components = ResolvedComponentSerializer(many=True)


class ManualPartSerializer(serializers.Serializer):
    brand = serializers.CharField(allow_blank=True)
    series = serializers.CharField(required=False, allow_blank=True)
    model = serializers.CharField(required=False, allow_blank=True)
    size = serializers.CharField(required=False, allow_blank=True)


class ComponentReplaceSerializer(serializers.Serializer):
    reason = serializers.ChoiceField(choices=UserComponent.ReplacementReason.choices)
    new_master_component_id = serializers.UUIDField(required=False, allow_null=True)
    manual_part = ManualPartSerializer(required=False, allow_null=True)


class CatalogOptionsQuerySerializer(serializers.Serializer):
    component_name = serializers.CharField()
    brand = serializers.CharField(required=False, allow_blank=True)
    size = serializers.CharField(required=False, allow_blank=True)
    series = serializers.CharField(required=False, allow_blank=True)


class CatalogOptionsSerializer(serializers.Serializer):
    brands = serializers.ListField(child=serializers.CharField())
    sizes = serializers.ListField(child=serializers.CharField())
    series = serializers.ListField(child=serializers.CharField())
    models = MasterComponentSerializer(many=True)

# equipment/serializers/equipment.py

from rest_framework import serializers

from equipment.models import Equipment


class EquipmentSerializer(serializers.ModelSerializer):
    """
    Equipment read shape (list + embedded in detail).
    """

    associated_equipment = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    is_ebike = serializers.BooleanField(read_only=True)
    is_shoes = serializers.BooleanField(read_only=True)

    class Meta:
        model = Equipment
        fields = [
            "id",
            "owner",
            "name",
            "type",
            "brand",
            "model",
            "frame_size",
            "size",
            "purchase_date",
            "purchase_price",
            "total_distance",
            "total_hours",
            "fit_data",
            "associated_equipment",
            "is_ebike",
            "is_shoes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class EquipmentSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Equipment
        fields = ["id", "name", "type", "brand", "model", "size"]
        read_only_fields = fields


class EquipmentUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, max_length=255)
    type = serializers.CharField(required=False, max_length=64)
    brand = serializers.CharField(required=False, allow_blank=True, max_length=120)
    model = serializers.CharField(required=False, allow_blank=True, max_length=120)
    frame_size = serializers.CharField(required=False, allow_blank=True, max_length=32)
    size = serializers.CharField(required=False, allow_blank=True, max_length=32)
    purchase_date = serializers.DateField(required=False, allow_null=True)
    purchase_price = serializers.DecimalField(
        required=False,
        allow_null=True,
        max_digits=10,
        decimal_places=2,
        min_value=0,
    )
    total_distance = serializers.FloatField(required=False, min_value=0)
    total_hours = serializers.FloatField(required=False, min_value=0)
    associated_equipment_ids = serializers.ListField(
        child=serializers.UUIDField(),
        required=False,
    )


class WheelsetCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    brand = serializers.CharField(required=False, allow_blank=True, max_length=120)
    model = serializers.CharField(required=False, allow_blank=True, max_length=120)
    purchase_date = serializers.DateField(required=False, allow_null=True)
    purchase_price = serializers.DecimalField(
        required=False,
        allow_null=True,
        max_digits=10,
        decimal_places=2,
        min_value=0,
    )


class CleatPositionSerializer(serializers.Serializer):
    fore_aft = serializers.FloatField(required=False, allow_null=True)
    lateral = serializers.FloatField(required=False, allow_null=True)
    rotational = serializers.FloatField(required=False, allow_null=True)


class BikeFitSerializer(serializers.Serializer):
    """
    Accepted bike fit fields. Anything else in the payload is ignored.
    """

    saddle_height = serializers.FloatField(required=False, allow_null=True)
    saddle_height_over_bars = serializers.FloatField(required=False, allow_null=True)
    saddle_to_handlebar_reach = serializers.FloatField(required=False, allow_null=True)
    saddle_angle = serializers.FloatField(required=False, allow_null=True)
    saddle_fore_aft = serializers.FloatField(required=False, allow_null=True)
    saddle_brand_model = serializers.CharField(required=False, allow_blank=True)
    stem_length = serializers.FloatField(required=False, allow_null=True)
    stem_angle = serializers.FloatField(required=False, allow_null=True)
    handlebar_brand_model = serializers.CharField(required=False, allow_blank=True)
    handlebar_width = serializers.FloatField(required=False, allow_null=True)
    handlebar_angle = serializers.FloatField(required=False, allow_null=True)
    handlebar_extension = serializers.FloatField(required=False, allow_null=True)
    brake_lever_position = serializers.CharField(required=False, allow_blank=True)
    crank_length = serializers.FloatField(required=False, allow_null=True)
    has_aero_bars = serializers.BooleanField(required=False, default=False)
    cleat_position = CleatPositionSerializer(required=False, allow_null=True)

from drf_spectacular.utils import extend_schema
from rest_framework import serializers
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from shops.tenancy import shop_for_user

# ---------------------------
# SERIALIZER
# ---------------------------


class MeSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    email = serializers.EmailField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    phone = serializers.CharField()
    role = serializers.CharField()
    date_format = serializers.CharField()
    shop_id = serializers.UUIDField(allow_null=True)
    shop_name = serializers.CharField()
    onboarding_complete = serializers.BooleanField()


# ---------------------------
# VIEW
# ---------------------------


class MeView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = MeSerializer

    @extend_schema(
        responses={200: MeSerializer},
        description="Get current authenticated user profile (with shop context)",
    )
    def get(self, request):
        user = request.user
        shop = shop_for_user(user)

        return Response(
            {
                "id": user.id,
                "email": user.email,
                "first_name": user.first_name,
                "last_name": user.last_name,
                "phone": user.phone,
                "role": user.role,
                "date_format": user.date_format,
                "shop_id": shop.id if shop else None,
                "shop_name": shop.name if shop else user.shop_name,
                "onboarding_complete": bool(shop and shop.onboarding_complete),
            }
        )

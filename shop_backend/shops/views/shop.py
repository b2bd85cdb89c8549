# shops/views/shop.py

"""
SHOP VIEWSET

Purpose:
- Owner onboarding (create the tenant, geocode its address)
- Shop profile + availability settings for the acting shop
- Dashboard overview cards
- Public proximity search (AllowAny)

Endpoints:
- POST        /api/shops/onboard/
- GET, PATCH  /api/shops/profile/
- GET, PATCH  /api/shops/availability/
- GET         /api/shops/overview/
- GET         /api/shops/nearby/?lat=..&lng=..&precision=..   (public)
"""

import logging

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from backend.api_errors import error_response
from permissions.roles import CAP_SHOP_CONFIGURE, CAP_WORKORDERS_VIEW, HasCapability, IsOwner
from shops.serializers.shop import (
    NearbyShopQuerySerializer,
    PublicShopSerializer,
    ShopAvailabilitySerializer,
    ShopOnboardingCommandSerializer,
    ShopOverviewSerializer,
    ShopProfileSerializer,
)
from shops.services.exceptions import AlreadyOnboardedError, GeocodingError, ShopServiceError
from shops.services.onboarding_service import onboard_shop, update_availability, update_shop_profile
from shops.services.overview_service import get_shop_overview
from shops.services.search_service import find_nearby_shops
from shops.tenancy import ShopScopedMixin

logger = logging.getLogger(__name__)


def _shop_error(exc: ShopServiceError):
    if isinstance(exc, AlreadyOnboardedError):
        return error_response(
            code="SHOP_ALREADY_ONBOARDED",
            message=str(exc),
            http_status=status.HTTP_409_CONFLICT,
        )
    if isinstance(exc, GeocodingError):
        return error_response(
            code="GEOCODING_FAILED",
            message=str(exc),
            http_status=status.HTTP_502_BAD_GATEWAY,
        )
    return error_response(
        code="SHOP_INVALID",
        message=str(exc),
        http_status=status.HTTP_400_BAD_REQUEST,
    )


class ShopViewSet(ShopScopedMixin, viewsets.GenericViewSet):
    """
    The acting user's shop (tenant).
    """

    permission_classes = [IsAuthenticated]
    serializer_class = ShopProfileSerializer

    required_capability = None

    def get_permissions(self):
        if self.action == "nearby":
            return [AllowAny()]
        if self.action == "onboard":
            return [IsAuthenticated(), IsOwner()]
        if self.action == "overview":
            self.required_capability = CAP_WORKORDERS_VIEW
            return [IsAuthenticated(), HasCapability()]

        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return [IsAuthenticated()]
        self.required_capability = CAP_SHOP_CONFIGURE
        return [IsAuthenticated(), HasCapability()]

    def get_throttles(self):
        if self.action == "nearby":
            self.throttle_scope = "public_search"
        return super().get_throttles()

    def get_serializer_class(self):
        if self.action == "onboard":
            return ShopOnboardingCommandSerializer
        if self.action == "availability":
            return ShopAvailabilitySerializer
        if self.action == "overview":
            return ShopOverviewSerializer
        if self.action == "nearby":
            return PublicShopSerializer
        return ShopProfileSerializer

    # --------------------------------------------------
    # ONBOARDING
    # --------------------------------------------------

    @extend_schema(request=ShopOnboardingCommandSerializer, responses={201: ShopProfileSerializer})
    @action(detail=False, methods=["post"], url_path="onboard")
    def onboard(self, request):
        command = ShopOnboardingCommandSerializer(data=request.data)
        command.is_valid(raise_exception=True)

        try:
            shop = onboard_shop(owner=request.user, **command.validated_data)
        except ShopServiceError as exc:
            logger.info(
                "Shop onboarding rejected",
                extra={"user_id": str(request.user.id), "reason": str(exc)},
            )
            return _shop_error(exc)

        return Response(ShopProfileSerializer(shop).data, status=status.HTTP_201_CREATED)

    # --------------------------------------------------
    # PROFILE
    # --------------------------------------------------

    @action(detail=False, methods=["get", "patch"], url_path="profile")
    def profile(self, request):
        shop = self.shop

        if request.method == "GET":
            return Response(ShopProfileSerializer(shop).data)

        serializer = ShopProfileSerializer(shop, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            shop = update_shop_profile(shop=shop, **serializer.validated_data)
        except ShopServiceError as exc:
            return _shop_error(exc)

        return Response(ShopProfileSerializer(shop).data)

    # --------------------------------------------------
    # AVAILABILITY
    # --------------------------------------------------

    @action(detail=False, methods=["get", "patch"], url_path="availability")
    def availability(self, request):
        shop = self.shop

        if request.method == "GET":
            return Response(ShopAvailabilitySerializer(shop).data)

        serializer = ShopAvailabilitySerializer(shop, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            shop = update_availability(shop=shop, **serializer.validated_data)
        except ShopServiceError as exc:
            return _shop_error(exc)

        return Response(ShopAvailabilitySerializer(shop).data)

    # --------------------------------------------------
    # OVERVIEW
    # --------------------------------------------------

    @extend_schema(responses={200: ShopOverviewSerializer})
    @action(detail=False, methods=["get"], url_path="overview")
    def overview(self, request):
        overview = get_shop_overview(shop=self.shop)
        return Response(ShopOverviewSerializer(overview).data)

    # --------------------------------------------------
    # PUBLIC PROXIMITY SEARCH
    # --------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter(name="lat", required=True, type=float),
            OpenApiParameter(name="lng", required=True, type=float),
            OpenApiParameter(name="precision", required=False, type=int),
        ],
        responses={200: PublicShopSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="nearby")
    def nearby(self, request):
        query = NearbyShopQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        shops = find_nearby_shops(**query.validated_data)
        data = PublicShopSerializer(shops, many=True).data
        return Response({"count": len(data), "results": data}, status=status.HTTP_200_OK)

# equipment/views/catalog.py

"""
MASTER COMPONENT CATALOG (read-only)

- GET /api/equipment/catalog/                    (?name=&system=&brand=)
- GET /api/equipment/catalog/{id}/
- GET /api/equipment/catalog/options/?component_name=..&brand=..&size=..&series=..
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from equipment.models import MasterComponent
from equipment.serializers import (
    CatalogOptionsQuerySerializer,
    CatalogOptionsSerializer,
    MasterComponentSerializer,
)
from equipment.services.catalog_service import catalog_options
from permissions.roles import CAP_CATALOG_VIEW, HasCapability


class MasterComponentViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = MasterComponent.objects.all()
    serializer_class = MasterComponentSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_CATALOG_VIEW
    filterset_fields = ["name", "system", "brand"]
    lookup_value_regex = "[0-9a-fA-F-]{36}"

    @extend_schema(
        parameters=[
            OpenApiParameter(name="component_name", required=True, type=str),
            OpenApiParameter(name="brand", required=False, type=str),
            OpenApiParameter(name="size", required=False, type=str),
            OpenApiParameter(name="series", required=False, type=str),
        ],
        responses={200: CatalogOptionsSerializer},
    )
    @action(detail=False, methods=["get"], url_path="options")
    def options(self, request):
        query = CatalogOptionsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        result = catalog_options(**query.validated_data)
        return Response(CatalogOptionsSerializer(result).data)

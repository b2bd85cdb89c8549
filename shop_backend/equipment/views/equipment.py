# equipment/views/equipment.py

"""
EQUIPMENT VIEWSET

Riders work on their own equipment; shop users work on the equipment of
riders their shop has work orders for. Anything else is reported as 404.

Endpoints (all under /api/equipment/):
- GET     /                                   (?owner=<uuid>&type=<type>)
- GET     /{id}/                              detail (components, wear, history)
- PATCH   /{id}/
- DELETE  /{id}/
- GET     /{id}/systems/{system}/             components of one system page
- GET     /{id}/components/{cid}/             component + sub-components
- DELETE  /{id}/components/{cid}/
- POST    /{id}/components/{cid}/replace/
- GET     /{id}/maintenance-log/
- POST    /{id}/maintenance-log/
- GET     /{id}/bike-fit/
- PUT     /{id}/bike-fit/
- POST    /{id}/wheelsets/
- POST    /{id}/service-request/            owner only; links the rider to a shop
"""

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.api_errors import error_response
from equipment.serializers import (
    BikeFitSerializer,
    ComponentReplaceSerializer,
    ComponentWithChildrenSerializer,
    EquipmentDetailSerializer,
    EquipmentSerializer,
    EquipmentUpdateSerializer,
    MaintenanceLogCreateSerializer,
    MaintenanceLogSerializer,
    SystemComponentsSerializer,
    WheelsetCreateSerializer,
)
from equipment.services.access import get_equipment_for, visible_equipment
from equipment.services.bike_fit import save_bike_fit
from equipment.services.component_join import resolve_component_with_children
from equipment.services.equipment_service import (
    add_maintenance_log,
    create_wheelset,
    delete_equipment,
    get_equipment_detail,
    get_system_components,
    update_equipment,
)
from equipment.services.exceptions import (
    CatalogEntryNotFoundError,
    ComponentNotFoundError,
    EquipmentNotFoundError,
    EquipmentServiceError,
    ReplacementError,
)
from equipment.services.replacement_service import (
    ManualPart,
    delete_user_component,
    replace_component,
)
from permissions.roles import CAP_EQUIPMENT_EDIT, CAP_EQUIPMENT_VIEW, HasCapability
from shops.tenancy import shop_for_user
from work_orders.serializers import CustomerWorkOrderSerializer, ServiceRequestSerializer
from work_orders.services.exceptions import ShopUnavailableError, WorkOrderError
from work_orders.services.work_order_service import request_service

UUID_PATTERN = "[0-9a-fA-F-]{36}"
COMPONENT_PATH = rf"components/(?P<component_id>{UUID_PATTERN})"


def _equipment_error(exc: EquipmentServiceError):
    if isinstance(exc, (ComponentNotFoundError, EquipmentNotFoundError)):
        return error_response(
            code="NOT_FOUND",
            message=str(exc),
            http_status=status.HTTP_404_NOT_FOUND,
        )
    if isinstance(exc, CatalogEntryNotFoundError):
        return error_response(
            code="CATALOG_ENTRY_NOT_FOUND",
            message=str(exc),
            http_status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, ReplacementError):
        return error_response(
            code="REPLACEMENT_INVALID",
            message=str(exc),
            http_status=status.HTTP_400_BAD_REQUEST,
        )
    return error_response(
        code="EQUIPMENT_INVALID",
        message=str(exc),
        http_status=status.HTTP_400_BAD_REQUEST,
    )


class EquipmentViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = EquipmentSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    filterset_fields = ["owner", "type"]
    lookup_value_regex = UUID_PATTERN

    required_capability = None

    def get_permissions(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            self.required_capability = CAP_EQUIPMENT_VIEW
        else:
            self.required_capability = CAP_EQUIPMENT_EDIT
        return [IsAuthenticated(), HasCapability()]

    def get_queryset(self):
        return visible_equipment(self.request.user).order_by("-created_at")

    def get_object(self):
        try:
            return get_equipment_for(self.request.user, self.kwargs[self.lookup_field])
        except EquipmentNotFoundError as exc:
            raise NotFound(str(exc))

    def _acting_shop(self):
        return shop_for_user(self.request.user)

    # --------------------------------------------------
    # DETAIL / UPDATE / DELETE
    # --------------------------------------------------

    @extend_schema(responses={200: EquipmentDetailSerializer})
    def retrieve(self, request, pk=None):
        detail = get_equipment_detail(self.get_object())
        return Response(EquipmentDetailSerializer(detail).data)

    @extend_schema(request=EquipmentUpdateSerializer, responses={200: EquipmentSerializer})
    def partial_update(self, request, pk=None):
        equipment = self.get_object()

        command = EquipmentUpdateSerializer(data=request.data, partial=True)
        command.is_valid(raise_exception=True)

        try:
            equipment = update_equipment(equipment=equipment, **command.validated_data)
        except EquipmentServiceError as exc:
            return _equipment_error(exc)

        return Response(EquipmentSerializer(equipment).data)

    def destroy(self, request, pk=None):
        delete_equipment(equipment=self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    # --------------------------------------------------
    # SYSTEM PAGES + COMPONENTS
    # --------------------------------------------------

    @extend_schema(responses={200: SystemComponentsSerializer})
    @action(detail=True, methods=["get"], url_path=r"systems/(?P<system>[A-Za-z-]+)")
    def system_components(self, request, pk=None, system=None):
        result = get_system_components(self.get_object(), system)
        return Response(SystemComponentsSerializer(result).data)

    @extend_schema(responses={200: ComponentWithChildrenSerializer})
    @action(detail=True, methods=["get", "delete"], url_path=COMPONENT_PATH)
    def component(self, request, pk=None, component_id=None):
        equipment = self.get_object()

        if request.method == "DELETE":
            try:
                delete_user_component(equipment=equipment, user_component_id=component_id)
            except ComponentNotFoundError as exc:
                return _equipment_error(exc)
            return Response(
                {"success": True, "message": "Component deleted successfully."},
                status=status.HTTP_200_OK,
            )

        try:
            result = resolve_component_with_children(equipment, component_id)
        except ComponentNotFoundError as exc:
            return _equipment_error(exc)
        return Response(ComponentWithChildrenSerializer(result).data)

    @extend_schema(request=ComponentReplaceSerializer)
    @action(detail=True, methods=["post"], url_path=rf"{COMPONENT_PATH}/replace")
    def replace_part(self, request, pk=None, component_id=None):
        equipment = self.get_object()

        command = ComponentReplaceSerializer(data=request.data)
        command.is_valid(raise_exception=True)
        data = command.validated_data

        manual = data.get("manual_part")
        try:
            result = replace_component(
                equipment=equipment,
                user_component_id=component_id,
                reason=data["reason"],
                new_master_component_id=data.get("new_master_component_id"),
                manual=ManualPart(**manual) if manual else None,
                shop=self._acting_shop(),
            )
        except EquipmentServiceError as exc:
            return _equipment_error(exc)

        return Response(
            {
                "success": True,
                "message": result.message,
                "new_component_id": str(result.new_component.id),
            },
            status=status.HTTP_200_OK,
        )

    # --------------------------------------------------
    # MAINTENANCE LOG
    # --------------------------------------------------

    @extend_schema(request=MaintenanceLogCreateSerializer, responses={200: MaintenanceLogSerializer(many=True)})
    @action(detail=True, methods=["get", "post"], url_path="maintenance-log")
    def maintenance_log(self, request, pk=None):
        equipment = self.get_object()

        if request.method == "GET":
            entries = equipment.maintenance_log.order_by("-date", "-created_at")
            return Response(MaintenanceLogSerializer(entries, many=True).data)

        command = MaintenanceLogCreateSerializer(data=request.data)
        command.is_valid(raise_exception=True)
        data = command.validated_data

        try:
            entry = add_maintenance_log(
                equipment=equipment,
                component_name=data["component_name"],
                service_type=data["service_type"],
                entry_date=data.get("date"),
                notes=data.get("notes", ""),
                cost=data.get("cost"),
                shop=self._acting_shop(),
            )
        except EquipmentServiceError as exc:
            return _equipment_error(exc)

        return Response(MaintenanceLogSerializer(entry).data, status=status.HTTP_201_CREATED)

    # --------------------------------------------------
    # BIKE FIT
    # --------------------------------------------------

    @extend_schema(request=BikeFitSerializer, responses={200: BikeFitSerializer})
    @action(detail=True, methods=["get", "put"], url_path="bike-fit")
    def bike_fit(self, request, pk=None):
        equipment = self.get_object()

        if request.method == "GET":
            return Response(equipment.fit_data or {"has_aero_bars": False})

        try:
            equipment = save_bike_fit(equipment=equipment, fit_data=request.data)
        except EquipmentServiceError as exc:
            return _equipment_error(exc)

        return Response(equipment.fit_data)

    # --------------------------------------------------
    # WHEELSETS
    # --------------------------------------------------

    @extend_schema(request=WheelsetCreateSerializer, responses={201: EquipmentSerializer})
    @action(detail=True, methods=["post"], url_path="wheelsets")
    def wheelsets(self, request, pk=None):
        parent = self.get_object()

        command = WheelsetCreateSerializer(data=request.data)
        command.is_valid(raise_exception=True)

        try:
            wheelset = create_wheelset(parent=parent, **command.validated_data)
        except EquipmentServiceError as exc:
            return _equipment_error(exc)

        return Response(EquipmentSerializer(wheelset).data, status=status.HTTP_201_CREATED)

    # --------------------------------------------------
    # SERVICE REQUEST
    # --------------------------------------------------

    @extend_schema(request=ServiceRequestSerializer, responses={201: CustomerWorkOrderSerializer})
    @action(detail=True, methods=["post"], url_path="service-request")
    def service_request(self, request, pk=None):
        equipment = self.get_object()
        if equipment.owner_id != request.user.id:
            raise NotFound("Equipment not found")

        command = ServiceRequestSerializer(data=request.data)
        command.is_valid(raise_exception=True)
        data = command.validated_data

        try:
            work_order = request_service(
                customer=request.user,
                shop_id=data["shop"],
                equipment=equipment,
                service_type=data.get("service_type", ""),
                notes=data.get("notes", ""),
            )
        except ShopUnavailableError as exc:
            return error_response(
                code="SHOP_NOT_FOUND",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        except WorkOrderError as exc:
            return error_response(
                code="WORK_ORDER_INVALID",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(CustomerWorkOrderSerializer(work_order).data, status=status.HTTP_201_CREATED)

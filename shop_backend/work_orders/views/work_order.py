# work_orders/views/work_order.py

"""
WORK ORDER VIEWSET (shop side)

Endpoints:
- GET    /api/work-orders/                      (?status=&updated_after=&customer=&equipment=)
- POST   /api/work-orders/                      customer/equipment only for riders the shop already serves
- GET    /api/work-orders/{id}/                 includes linked equipment + fit data
- PATCH  /api/work-orders/{id}/                 notes / internal notes / issue
- POST   /api/work-orders/{id}/status/          {"status": "<one of the sequence>"}
- POST   /api/work-orders/{id}/assess-priority/
- GET    /api/work-orders/statuses/             the fixed status sequence

List order: open orders first, then newest first.
"""

from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.api_errors import error_response
from equipment.models import Equipment
from permissions.roles import (
    CAP_WORKORDERS_EDIT,
    CAP_WORKORDERS_VIEW,
    HasCapability,
)
from shops.tenancy import ShopScopedMixin
from work_orders.filters import WorkOrderFilter
from work_orders.models import STATUS_SEQUENCE
from work_orders.serializers import (
    WorkOrderCreateSerializer,
    WorkOrderDetailSerializer,
    WorkOrderNotesSerializer,
    WorkOrderSerializer,
    WorkOrderStatusSerializer,
)
from work_orders.services.exceptions import (
    CustomerNotServedError,
    InvalidStatusError,
    WorkOrderError,
)
from work_orders.services.priority_service import assess_and_save_priority
from work_orders.services.status_service import update_status
from work_orders.services.work_order_service import create_work_order, shop_work_orders

User = get_user_model()

READ_ACTIONS = {"list", "retrieve", "statuses"}


class WorkOrderViewSet(
    ShopScopedMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = WorkOrderSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    filterset_class = WorkOrderFilter
    lookup_value_regex = "[0-9a-fA-F-]{36}"

    required_capability = None

    def get_permissions(self):
        if self.action in READ_ACTIONS:
            self.required_capability = CAP_WORKORDERS_VIEW
        else:
            self.required_capability = CAP_WORKORDERS_EDIT
        return [IsAuthenticated(), HasCapability()]

    def get_queryset(self):
        return shop_work_orders(self.shop)

    def get_serializer_class(self):
        if self.action == "retrieve":
            return WorkOrderDetailSerializer
        if self.action == "create":
            return WorkOrderCreateSerializer
        if self.action == "partial_update":
            return WorkOrderNotesSerializer
        if self.action == "set_status":
            return WorkOrderStatusSerializer
        return WorkOrderSerializer

    # --------------------------------------------------
    # CREATE
    # --------------------------------------------------

    @extend_schema(request=WorkOrderCreateSerializer, responses={201: WorkOrderSerializer})
    def create(self, request, *args, **kwargs):
        command = WorkOrderCreateSerializer(data=request.data)
        command.is_valid(raise_exception=True)
        data = dict(command.validated_data)

        customer_id = data.pop("customer", None)
        equipment_id = data.pop("equipment", None)

        customer = None
        if customer_id:
            customer = User.objects.filter(id=customer_id).first()
            if customer is None:
                return error_response(
                    code="CUSTOMER_NOT_FOUND",
                    message="Customer not found.",
                    http_status=status.HTTP_400_BAD_REQUEST,
                )

        equipment = None
        if equipment_id:
            equipment = Equipment.objects.select_related("owner").filter(id=equipment_id).first()
            if equipment is None:
                return error_response(
                    code="EQUIPMENT_NOT_FOUND",
                    message="Equipment not found.",
                    http_status=status.HTTP_400_BAD_REQUEST,
                )

        try:
            work_order = create_work_order(
                shop=self.shop,
                customer=customer,
                equipment=equipment,
                **data,
            )
        except CustomerNotServedError:
            # unserved riders look exactly like unknown ids
            if customer_id:
                return error_response(
                    code="CUSTOMER_NOT_FOUND",
                    message="Customer not found.",
                    http_status=status.HTTP_400_BAD_REQUEST,
                )
            return error_response(
                code="EQUIPMENT_NOT_FOUND",
                message="Equipment not found.",
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        except WorkOrderError as exc:
            return error_response(
                code="WORK_ORDER_INVALID",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(WorkOrderSerializer(work_order).data, status=status.HTTP_201_CREATED)

    # --------------------------------------------------
    # NOTES
    # --------------------------------------------------

    @extend_schema(request=WorkOrderNotesSerializer, responses={200: WorkOrderSerializer})
    def partial_update(self, request, *args, **kwargs):
        work_order = self.get_object()
        serializer = WorkOrderNotesSerializer(work_order, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(WorkOrderSerializer(work_order).data)

    # --------------------------------------------------
    # STATUS
    # --------------------------------------------------

    @extend_schema(request=WorkOrderStatusSerializer, responses={200: WorkOrderSerializer})
    @action(detail=True, methods=["post"], url_path="status")
    def set_status(self, request, pk=None):
        work_order = self.get_object()

        command = WorkOrderStatusSerializer(data=request.data)
        command.is_valid(raise_exception=True)

        try:
            work_order = update_status(work_order=work_order, status=command.validated_data["status"])
        except InvalidStatusError as exc:
            return error_response(
                code="INVALID_STATUS",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(WorkOrderSerializer(work_order).data)

    @action(detail=False, methods=["get"], url_path="statuses")
    def statuses(self, request):
        return Response({"statuses": STATUS_SEQUENCE})

    # --------------------------------------------------
    # PRIORITY
    # --------------------------------------------------

    @extend_schema(request=None, responses={200: WorkOrderSerializer})
    @action(detail=True, methods=["post"], url_path="assess-priority")
    def assess_priority(self, request, pk=None):
        work_order = assess_and_save_priority(work_order=self.get_object())
        return Response(WorkOrderSerializer(work_order).data)

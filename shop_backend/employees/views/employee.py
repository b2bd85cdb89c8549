# employees/views/employee.py

"""
EMPLOYEE VIEWSET (shop roster)

Endpoints:
- GET     /api/employees/                   (?updated_after=<iso>&role=<role>)
- POST    /api/employees/                   name + email; role is always Staff
- GET     /api/employees/{id}/
- PATCH   /api/employees/{id}/              role only
- DELETE  /api/employees/{id}/
"""

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.api_errors import error_response
from employees.filters import EmployeeFilter
from employees.models import Employee
from employees.serializers import EmployeeRoleSerializer, EmployeeSerializer
from employees.services.exceptions import DuplicateEmployeeError, EmployeeError
from employees.services.roster_service import add_employee, update_employee_role
from permissions.roles import CAP_EMPLOYEES_MANAGE, HasCapability
from shops.tenancy import ShopScopedMixin


class EmployeeViewSet(
    ShopScopedMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = EmployeeSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_EMPLOYEES_MANAGE
    filterset_class = EmployeeFilter
    lookup_value_regex = "[0-9a-fA-F-]{36}"

    def get_queryset(self):
        return Employee.objects.filter(shop=self.shop).order_by("name")

    @extend_schema(request=EmployeeSerializer, responses={201: EmployeeSerializer})
    def create(self, request, *args, **kwargs):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            employee = add_employee(shop=self.shop, **serializer.validated_data)
        except DuplicateEmployeeError as exc:
            return error_response(
                code="EMPLOYEE_EXISTS",
                message=str(exc),
                http_status=status.HTTP_409_CONFLICT,
            )

        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=EmployeeRoleSerializer, responses={200: EmployeeSerializer})
    def partial_update(self, request, *args, **kwargs):
        employee = self.get_object()

        command = EmployeeRoleSerializer(data=request.data)
        command.is_valid(raise_exception=True)

        try:
            employee = update_employee_role(employee=employee, role=command.validated_data["role"])
        except EmployeeError as exc:
            return error_response(
                code="EMPLOYEE_INVALID",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(EmployeeSerializer(employee).data)

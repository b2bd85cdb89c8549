# employees/serializers/employee.py

from rest_framework import serializers

from employees.models import Employee


class EmployeeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = ["id", "name", "email", "role", "created_at", "updated_at"]
        read_only_fields = ["id", "role", "created_at", "updated_at"]


class EmployeeRoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Employee.Role.choices)

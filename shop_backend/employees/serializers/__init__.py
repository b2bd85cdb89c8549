from .employee import EmployeeRoleSerializer, EmployeeSerializer

__all__ = [
    "EmployeeSerializer",
    "EmployeeRoleSerializer",
]

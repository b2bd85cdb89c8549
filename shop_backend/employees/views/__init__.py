from .employee import EmployeeViewSet

__all__ = [
    "EmployeeViewSet",
]

# employees/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from employees.views import EmployeeViewSet

app_name = "employees"

router = SimpleRouter()
router.register(r"", EmployeeViewSet, basename="employee")

urlpatterns = [
    path("", include(router.urls)),
]

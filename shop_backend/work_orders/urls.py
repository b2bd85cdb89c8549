# work_orders/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from work_orders.views import WorkOrderViewSet

app_name = "work_orders"

router = SimpleRouter()
router.register(r"", WorkOrderViewSet, basename="work-order")

urlpatterns = [
    path("", include(router.urls)),
]

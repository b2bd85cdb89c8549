# equipment/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from equipment.views import EquipmentViewSet, MasterComponentViewSet

app_name = "equipment"

# catalog is registered first so "catalog/" is never read as an equipment id
router = SimpleRouter()
router.register(r"catalog", MasterComponentViewSet, basename="master-component")
router.register(r"", EquipmentViewSet, basename="equipment")

urlpatterns = [
    path("", include(router.urls)),
]

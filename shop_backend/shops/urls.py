# shops/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from shops.views import ShopViewSet

app_name = "shops"

# The acting shop is resolved from the user, so routes carry no id.
router = SimpleRouter()
router.register(r"", ShopViewSet, basename="shop")

urlpatterns = [
    path("", include(router.urls)),
]

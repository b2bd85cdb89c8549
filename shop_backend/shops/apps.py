# shops/apps.py

"""
SHOPS APP CONFIG

Tenant module:
- Shop (service provider) profile, location + geohash
- Onboarding
- Availability settings
- Dashboard overview
"""

from django.apps import AppConfig


class ShopsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "shops"
    verbose_name = "Bike Shops"

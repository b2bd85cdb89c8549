# equipment/apps.py

"""
EQUIPMENT APP CONFIG

Customer equipment records:
- Equipment (bikes, shoes, wheelsets)
- Shared master component catalog + per-equipment user components
- Maintenance log, bike fit, component replacement
"""

from django.apps import AppConfig


class EquipmentConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "equipment"
    verbose_name = "Customer Equipment"

# work_orders/apps.py

"""
WORK ORDERS APP CONFIG

Customer service requests tracked through the fixed status sequence.
"""

from django.apps import AppConfig


class WorkOrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "work_orders"
    verbose_name = "Work Orders"

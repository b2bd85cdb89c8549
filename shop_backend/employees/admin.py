# employees/admin.py

from django.contrib import admin

from employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "role", "shop", "updated_at")
    search_fields = ("name", "email", "shop__name")
    list_filter = ("role",)

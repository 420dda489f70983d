from django.contrib import admin

from .models import DailyIntakeLog


@admin.register(DailyIntakeLog)
class DailyIntakeLogAdmin(admin.ModelAdmin):
    list_display = ("client_id", "date", "updated_at")
    search_fields = ("client_id",)
    date_hierarchy = "date"

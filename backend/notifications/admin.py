from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("recipient_id", "short_message", "read", "created_at", "read_at")
    list_filter = ("read",)
    search_fields = ("recipient_id", "message")
    readonly_fields = ("id", "created_at", "read_at")
    ordering = ("-created_at",)

    def short_message(self, obj):
        return obj.message[:60]

    short_message.short_description = "Message"

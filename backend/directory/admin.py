from django.contrib import admin, messages

from .models import ApprovalStatus, Caterer, DeliveryPerson
from .services import DirectoryService


class DirectoryEntryAdmin(admin.ModelAdmin):
    list_display = ("uid", "name", "email", "region", "status", "created_at")
    list_filter = ("status", "region")
    search_fields = ("uid", "name", "email")
    actions = ["approve_selected", "reject_selected"]
    review = None

    def _review_selected(self, request, queryset, status):
        for entry in queryset:
            self.review(entry.uid, status)
        self.message_user(request, f"{queryset.count()} account(s) marked {status}.", messages.SUCCESS)

    @admin.action(description="Approve selected accounts")
    def approve_selected(self, request, queryset):
        self._review_selected(request, queryset, ApprovalStatus.APPROVED)

    @admin.action(description="Reject selected accounts")
    def reject_selected(self, request, queryset):
        self._review_selected(request, queryset, ApprovalStatus.REJECTED)


@admin.register(Caterer)
class CatererAdmin(DirectoryEntryAdmin):
    review = staticmethod(DirectoryService.review_caterer)


@admin.register(DeliveryPerson)
class DeliveryPersonAdmin(DirectoryEntryAdmin):
    review = staticmethod(DirectoryService.review_delivery_person)

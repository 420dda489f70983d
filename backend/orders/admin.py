from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("meal_id", "meal_name", "quantity", "unit_price", "caterer_id", "get_line_item_total")
    fields = readonly_fields
    can_delete = False

    def get_line_item_total(self, obj):
        return f"{obj.line_total:,.2f}"

    get_line_item_total.short_description = "Line Item Total"

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Orders are read-only here; status changes go through the API so that
    transitions are checked and notifications are sent.
    """

    list_display = ("short_id", "client_name", "status", "total_price", "delivery_person_id", "order_date")
    list_filter = ("status", "order_date")
    search_fields = ("id", "client_id", "client_name", "delivery_person_id")
    ordering = ("-order_date",)
    readonly_fields = (
        "id",
        "client_id",
        "client_name",
        "delivery_address",
        "total_price",
        "status",
        "order_date",
        "delivery_date",
        "estimated_delivery_minutes",
        "caterer_ids",
        "delivery_person_id",
        "version",
        "updated_at",
    )
    inlines = [OrderItemInline]

    def has_add_permission(self, request):
        return False

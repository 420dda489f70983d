from rest_framework import serializers

from core_backend.base import BaseModelSerializer
from orders.models import Order, OrderItem


class OrderItemSerializer(BaseModelSerializer):
    line_total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "meal_id",
            "meal_name",
            "quantity",
            "unit_price",
            "caterer_id",
            "line_total",
        ]
        read_only_fields = fields


class OrderSerializer(BaseModelSerializer):
    """Read-only view of an order with its items."""

    items = OrderItemSerializer(many=True, read_only=True)
    short_id = serializers.CharField(read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "short_id",
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
            "items",
        ]
        read_only_fields = fields
        prefetch_related_fields = ["items"]


class DeliveryEarningsSerializer(serializers.Serializer):
    delivered_count = serializers.IntegerField()
    fee_per_delivery = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_earnings = serializers.DecimalField(max_digits=12, decimal_places=2)
    delivered_orders = OrderSerializer(many=True)

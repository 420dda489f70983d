from rest_framework import serializers

from core_backend.base import StrictInputSerializer
from orders.models import Order


class OrderItemInputSerializer(StrictInputSerializer):
    meal_id = serializers.CharField(max_length=128)
    meal_name = serializers.CharField(max_length=255)
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    caterer_id = serializers.CharField(max_length=128)


class PlaceOrderSerializer(StrictInputSerializer):
    """
    Body of ``POST /api/orders/``. The client is the caller, so no client
    id is accepted here.
    """

    client_name = serializers.CharField(max_length=255)
    delivery_address = serializers.CharField()
    items = OrderItemInputSerializer(many=True, allow_empty=False)
    total_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)


class UpdateStatusSerializer(StrictInputSerializer):
    status = serializers.ChoiceField(choices=Order.OrderStatus.choices)
    delivery_person_id = serializers.CharField(max_length=128, required=False, allow_null=True, allow_blank=True)
    expected_version = serializers.IntegerField(min_value=1, required=False, allow_null=True)

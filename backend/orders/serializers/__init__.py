"""
Orders serializers package.
"""

# Read serializers
from .order_serializers import (
    DeliveryEarningsSerializer,
    OrderItemSerializer,
    OrderSerializer,
)

# Input serializers
from .input_serializers import (
    OrderItemInputSerializer,
    PlaceOrderSerializer,
    UpdateStatusSerializer,
)

__all__ = [
    # Read
    'DeliveryEarningsSerializer',
    'OrderItemSerializer',
    'OrderSerializer',
    # Input
    'OrderItemInputSerializer',
    'PlaceOrderSerializer',
    'UpdateStatusSerializer',
]

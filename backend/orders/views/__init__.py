from .order_viewset import OrderViewSet
from .delivery_views import DeliveryHistoryView, DeliveryOrderViewSet

__all__ = [
    'OrderViewSet',
    'DeliveryOrderViewSet',
    'DeliveryHistoryView',
]

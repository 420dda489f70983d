from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import DeliveryHistoryView, DeliveryOrderViewSet, OrderViewSet

app_name = "orders"

router = SimpleRouter()
router.register(r"orders", OrderViewSet, basename="order")
router.register(r"delivery/orders", DeliveryOrderViewSet, basename="delivery-order")

urlpatterns = [
    path("delivery/history/", DeliveryHistoryView.as_view(), name="delivery-history"),
    path("", include(router.urls)),
]

"""
Orders services package - service layer for the order lifecycle.

- OrderPlacementService: Atomic order + intake log creation, caterer fan-out
- OrderStatusService: Status state machine, delivery-person binding
- DeliveryQueryService: Deliverable pool by region, a delivery person's orders
- OrderNotificationService: Messages emitted after order writes commit
"""

# Placement
from .placement_service import OrderLine, OrderPlacementService, derive_caterer_ids

# State machine
from .status_service import OrderStatusService, get_order

# Delivery queries
from .delivery_service import (
    ACTIVE_DELIVERY_STATUSES,
    COMPLETED_DELIVERY_STATUSES,
    DeliveryQueryService,
)

# Notifications
from .notification_service import OrderNotificationService

__all__ = [
    # Placement
    'OrderLine',
    'OrderPlacementService',
    'derive_caterer_ids',
    # State machine
    'OrderStatusService',
    'get_order',
    # Delivery
    'ACTIVE_DELIVERY_STATUSES',
    'COMPLETED_DELIVERY_STATUSES',
    'DeliveryQueryService',
    # Notifications
    'OrderNotificationService',
]

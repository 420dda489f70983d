from decimal import Decimal
from typing import Iterable, List
import logging

from django.conf import settings

from directory.services import DirectoryService
from orders.models import Order
from orders.transitions import coerce_status

logger = logging.getLogger(__name__)

Status = Order.OrderStatus

ACTIVE_DELIVERY_STATUSES = frozenset({Status.READY_FOR_DELIVERY, Status.IN_DELIVERY})
COMPLETED_DELIVERY_STATUSES = frozenset({Status.DELIVERED})


class DeliveryQueryService:
    """Read side of delivery assignment: the regional pool and a person's own orders."""

    @staticmethod
    def list_deliverable_orders(region: str, unassigned_only: bool = False) -> List[Order]:
        """
        ready_for_delivery orders with at least one item from an approved
        caterer located in ``region``, newest first.

        The region lives on the caterer, so the filter joins through the
        directory's approved caterer ids.
        """
        caterer_ids = DirectoryService.approved_caterer_ids_in_region(region)
        if not caterer_ids:
            return []

        queryset = Order.objects.filter(
            status=Status.READY_FOR_DELIVERY,
            items__caterer_id__in=caterer_ids,
        )
        if unassigned_only:
            queryset = queryset.filter(delivery_person_id__isnull=True)
        return list(queryset.distinct().prefetch_related("items").order_by("-order_date"))

    @staticmethod
    def list_mine(delivery_person_id: str, statuses: Iterable) -> List[Order]:
        """
        Orders bound to ``delivery_person_id`` whose status is in
        ``statuses``, newest first. No statuses means no orders, and no
        query is issued.
        """
        statuses = {coerce_status(status) for status in statuses}
        if not statuses:
            return []

        return list(
            Order.objects.filter(delivery_person_id=delivery_person_id, status__in=statuses)
            .prefetch_related("items")
            .order_by("-order_date")
        )

    @staticmethod
    def earnings_summary(delivery_person_id: str) -> dict:
        """Flat fee per delivered order."""
        delivered = DeliveryQueryService.list_mine(delivery_person_id, COMPLETED_DELIVERY_STATUSES)
        fee = Decimal(getattr(settings, "DELIVERY_FEE_PER_ORDER", Decimal("7.00")))
        return {
            "delivered_orders": delivered,
            "delivered_count": len(delivered),
            "fee_per_delivery": fee,
            "total_earnings": fee * len(delivered),
        }

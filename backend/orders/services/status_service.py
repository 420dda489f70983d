from typing import List, Optional
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from directory.services import DirectoryService
from orders.exceptions import (
    DeliveryPersonUnavailableError,
    OrderNotFoundError,
    OrderValidationError,
    StaleOrderError,
    StatusUpdateError,
)
from orders.models import Order
from orders.transitions import coerce_status, resolve_transition
from .notification_service import OrderNotificationService

logger = logging.getLogger(__name__)

Status = Order.OrderStatus

# Statuses that only make sense once a delivery person holds the order
HANDLED_BY_DELIVERY_PERSON = frozenset({Status.IN_DELIVERY, Status.DELIVERED})


def get_order(order_id, for_update=False) -> Order:
    queryset = Order.objects.select_for_update() if for_update else Order.objects.all()
    try:
        return queryset.get(id=order_id)
    except (Order.DoesNotExist, ValidationError, ValueError):
        raise OrderNotFoundError(order_id)


class OrderStatusService:
    """Core service for the order status state machine."""

    @staticmethod
    def update_status(
        order_id,
        new_status,
        delivery_person_id: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> Order:
        """
        Moves an order to ``new_status``.

        - The transition must be in the transition table.
        - Moving to ready_for_delivery may bind ``delivery_person_id``
          (an approved delivery person); no other transition accepts one.
        - Moving to in_delivery or delivered requires a bound delivery person.
        - Moving to delivered stamps ``delivery_date``.
        - ``expected_version`` makes the write conditional on the version
          the caller last read; any concurrent write is reported as
          StaleOrderError instead of being overwritten.

        Status and side fields are written in one UPDATE. Client and
        delivery-person notifications follow the commit.
        """
        new_status = coerce_status(new_status)
        if delivery_person_id and new_status != Status.READY_FOR_DELIVERY:
            raise OrderValidationError(
                "A delivery person can only be assigned when the order becomes ready_for_delivery."
            )

        try:
            with transaction.atomic():
                order = get_order(order_id, for_update=True)

                if expected_version is not None and order.version != expected_version:
                    raise StaleOrderError(order.id, expected_version, order.version)

                resolve_transition(order.status, new_status)

                if new_status in HANDLED_BY_DELIVERY_PERSON and not order.delivery_person_id:
                    raise DeliveryPersonUnavailableError(
                        f"Order {order.id} has no delivery person; it must be assigned or claimed first."
                    )

                now = timezone.now()
                changes = {"status": new_status, "version": order.version + 1, "updated_at": now}
                if new_status == Status.READY_FOR_DELIVERY and delivery_person_id:
                    if not DirectoryService.is_approved_delivery_person(delivery_person_id):
                        raise DeliveryPersonUnavailableError(
                            f"Delivery person {delivery_person_id} is not an approved delivery person."
                        )
                    changes["delivery_person_id"] = delivery_person_id
                if new_status == Status.DELIVERED:
                    changes["delivery_date"] = now

                updated = Order.objects.filter(id=order.id, version=order.version).update(**changes)
                if updated == 0:
                    raise StaleOrderError(order.id, order.version)

                previous_status = order.status
                for field, value in changes.items():
                    setattr(order, field, value)

                OrderNotificationService.after_commit(
                    OrderNotificationService.notify_status_change,
                    order,
                    new_status,
                    assigned_delivery_person_id=changes.get("delivery_person_id"),
                )
        except DatabaseError as e:
            logger.error(f"Error updating status of order {order_id} to {new_status}: {e}", exc_info=True)
            raise StatusUpdateError("Could not update the order status.") from e

        logger.info(f"Order {order.id} moved from {previous_status} to {new_status} (version {order.version})")
        return order

    @staticmethod
    def claim_for_delivery(order_id, delivery_person_id: str) -> Order:
        """
        Binds a delivery person to a ready_for_delivery order that has none.

        At most one delivery person is ever bound: the UPDATE only matches
        while ``delivery_person_id`` is still empty.
        """
        if not DirectoryService.is_approved_delivery_person(delivery_person_id):
            raise DeliveryPersonUnavailableError(
                f"Delivery person {delivery_person_id} is not an approved delivery person."
            )

        try:
            with transaction.atomic():
                order = get_order(order_id, for_update=True)
                if order.status != Status.READY_FOR_DELIVERY:
                    raise OrderValidationError(
                        f"Only ready_for_delivery orders can be claimed; order is {order.status}."
                    )

                changes = {
                    "delivery_person_id": delivery_person_id,
                    "version": order.version + 1,
                    "updated_at": timezone.now(),
                }
                updated = Order.objects.filter(
                    id=order.id,
                    status=Status.READY_FOR_DELIVERY,
                    delivery_person_id__isnull=True,
                ).update(**changes)
                if updated == 0:
                    raise DeliveryPersonUnavailableError(f"Order {order.id} already has a delivery person.")

                for field, value in changes.items():
                    setattr(order, field, value)

                OrderNotificationService.after_commit(OrderNotificationService.notify_claimed, order)
        except DatabaseError as e:
            logger.error(f"Error assigning order {order_id} to {delivery_person_id}: {e}", exc_info=True)
            raise StatusUpdateError("Could not assign the order.") from e

        logger.info(f"Order {order.id} claimed by delivery person {delivery_person_id}")
        return order

    @staticmethod
    def get_orders_for_caterer(caterer_id: str, statuses=None) -> List[Order]:
        """Orders containing at least one of the caterer's meals, newest first."""
        queryset = Order.objects.filter(items__caterer_id=caterer_id)
        if statuses:
            queryset = queryset.filter(status__in=[coerce_status(s) for s in statuses])
        return list(queryset.distinct().prefetch_related("items").order_by("-order_date"))

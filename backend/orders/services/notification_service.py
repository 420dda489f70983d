import logging

from django.db import transaction

from notifications.services import NotificationService
from orders.models import Order

logger = logging.getLogger(__name__)

Status = Order.OrderStatus

CLIENT_STATUS_PHRASES = {
    Status.IN_PREPARATION: "is being prepared",
    Status.READY_FOR_DELIVERY: "is ready and waiting for its delivery",
    Status.DELIVERED: "has been delivered",
    Status.CANCELLED: "has been cancelled",
}


class OrderNotificationService:
    """
    Messages emitted as a consequence of order events.

    Every method here runs after the business write has committed and is
    best-effort: failures are logged by NotificationService.notify_safely
    and never reach the caller of the order operation.
    """

    @staticmethod
    def client_status_message(order: Order, status) -> str:
        return f"Your order #{order.short_id}... {CLIENT_STATUS_PHRASES[status]}."

    @staticmethod
    def caterer_new_order_message(order: Order) -> str:
        return f"New order #{order.short_id}... from {order.client_name}."

    @staticmethod
    def delivery_assignment_message(order: Order) -> str:
        return (
            f"New delivery assigned: order #{order.short_id}... "
            f"for {order.client_name}, {order.delivery_address}."
        )

    @staticmethod
    def notify_caterers(order: Order) -> int:
        """One notification per distinct caterer of the order."""
        message = OrderNotificationService.caterer_new_order_message(order)
        sent = 0
        for caterer_id in order.caterer_ids:
            if NotificationService.notify_safely(caterer_id, message) is not None:
                sent += 1
        logger.info(f"Notified {sent}/{len(order.caterer_ids)} caterers of order {order.id}")
        return sent

    @staticmethod
    def notify_status_change(order: Order, status, assigned_delivery_person_id=None) -> None:
        """
        Client message for statuses that matter to them; assignment message
        to the delivery person bound at ready_for_delivery.
        """
        if status in CLIENT_STATUS_PHRASES:
            NotificationService.notify_safely(
                order.client_id,
                OrderNotificationService.client_status_message(order, status),
            )

        if status == Status.READY_FOR_DELIVERY and assigned_delivery_person_id:
            NotificationService.notify_safely(
                assigned_delivery_person_id,
                OrderNotificationService.delivery_assignment_message(order),
            )

    @staticmethod
    def notify_claimed(order: Order) -> None:
        NotificationService.notify_safely(
            order.client_id,
            f"Your order #{order.short_id}... has been assigned to a delivery person.",
        )

    @staticmethod
    def after_commit(callback, *args, **kwargs) -> None:
        """Schedules a notification callback for when the current transaction commits."""
        transaction.on_commit(lambda: callback(*args, **kwargs))

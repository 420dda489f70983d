from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Sequence
import logging
import uuid

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from clients.services import IntakeLogService, intake_entry
from orders.exceptions import OrderPlacementError, OrderValidationError
from orders.models import Order, OrderItem
from .notification_service import OrderNotificationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderLine:
    """A validated line of an order being placed."""
    meal_id: str
    meal_name: str
    quantity: int
    unit_price: Decimal
    caterer_id: str

    @classmethod
    def from_dict(cls, data: dict) -> "OrderLine":
        try:
            line = cls(
                meal_id=str(data["meal_id"]).strip(),
                meal_name=str(data["meal_name"]).strip(),
                quantity=data["quantity"],
                unit_price=Decimal(str(data["unit_price"])),
                caterer_id=str(data["caterer_id"]).strip(),
            )
        except KeyError as e:
            raise OrderValidationError(f"Order item is missing '{e.args[0]}'.")
        except (InvalidOperation, TypeError, ValueError):
            raise OrderValidationError(f"Order item has an invalid unit price: {data.get('unit_price')!r}.")
        line.validate()
        return line

    def validate(self) -> None:
        if not self.meal_id or not self.meal_name or not self.caterer_id:
            raise OrderValidationError("Order items need a meal id, a meal name and a caterer id.")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise OrderValidationError(f"Quantity must be at least 1 (meal {self.meal_id}).")
        if self.unit_price < 0:
            raise OrderValidationError(f"Unit price cannot be negative (meal {self.meal_id}).")


def derive_caterer_ids(lines: Iterable[OrderLine]) -> List[str]:
    """Distinct caterer ids of the lines, in first-seen order."""
    return list(dict.fromkeys(line.caterer_id for line in lines))


class OrderPlacementService:
    """Creates orders together with the client's intake log entries."""

    @staticmethod
    def place_order(
        client_id: str,
        client_name: str,
        delivery_address: str,
        items: Sequence,
        total_price,
    ) -> uuid.UUID:
        """
        Places an order and returns its id.

        The order, its items and the intake-log append commit together or
        not at all. Caterers are notified only after the commit, one
        message per distinct caterer.
        """
        lines = OrderPlacementService._validate(client_id, client_name, delivery_address, items)
        total_price = OrderPlacementService._validate_total(total_price)
        caterer_ids = derive_caterer_ids(lines)

        now = timezone.now()
        try:
            with transaction.atomic():
                order = Order.objects.create(
                    client_id=client_id,
                    client_name=client_name,
                    delivery_address=delivery_address,
                    total_price=total_price,
                    status=Order.OrderStatus.PENDING,
                    order_date=now,
                    delivery_date=now,
                    estimated_delivery_minutes=getattr(settings, "ORDER_DEFAULT_DELIVERY_ESTIMATE_MINUTES", 45),
                    caterer_ids=caterer_ids,
                )
                OrderItem.objects.bulk_create([
                    OrderItem(
                        order=order,
                        meal_id=line.meal_id,
                        meal_name=line.meal_name,
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                        caterer_id=line.caterer_id,
                    )
                    for line in lines
                ])
                IntakeLogService.append_entries(
                    client_id,
                    [intake_entry(line.meal_id, line.meal_name, line.quantity) for line in lines],
                    day=timezone.localdate(now),
                )
                OrderNotificationService.after_commit(OrderNotificationService.notify_caterers, order)
        except DatabaseError as e:
            logger.error(f"Error placing order for client {client_id}: {e}", exc_info=True)
            raise OrderPlacementError("Could not place order.") from e

        logger.info(
            f"Placed order {order.id} for client {client_id}: "
            f"{len(lines)} items from {len(caterer_ids)} caterers, total {total_price}"
        )
        return order.id

    @staticmethod
    def _validate(client_id, client_name, delivery_address, items) -> List[OrderLine]:
        if not client_id:
            raise OrderValidationError("An order needs a client id.")
        if not client_name:
            raise OrderValidationError("An order needs a client name.")
        if not delivery_address:
            raise OrderValidationError("An order needs a delivery address.")
        if not items:
            raise OrderValidationError("An order needs at least one item.")

        lines = []
        for item in items:
            if isinstance(item, OrderLine):
                item.validate()
                lines.append(item)
            else:
                lines.append(OrderLine.from_dict(item))
        return lines

    @staticmethod
    def _validate_total(total_price) -> Decimal:
        try:
            total = Decimal(str(total_price))
        except (InvalidOperation, ValueError):
            raise OrderValidationError(f"Invalid total price: {total_price!r}.")
        if total < 0:
            raise OrderValidationError("Total price cannot be negative.")
        return total

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Order(models.Model):
    """
    One client purchase, possibly spanning several caterers.

    Created by OrderPlacementService, mutated only by OrderStatusService.
    ``caterer_ids`` is the deduplicated list of the items' caterers and
    ``version`` increases by one on every status write.
    """

    class OrderStatus(models.TextChoices):
        PENDING = "pending", _("Pending")
        IN_PREPARATION = "in_preparation", _("In Preparation")
        READY_FOR_DELIVERY = "ready_for_delivery", _("Ready for Delivery")
        IN_DELIVERY = "in_delivery", _("In Delivery")
        DELIVERED = "delivered", _("Delivered")
        CANCELLED = "cancelled", _("Cancelled")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    client_id = models.CharField(max_length=128, db_index=True)
    client_name = models.CharField(max_length=255)
    delivery_address = models.TextField()
    total_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    status = models.CharField(
        max_length=30,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
        db_index=True,
    )
    order_date = models.DateTimeField(default=timezone.now, db_index=True)
    # Equal to order_date until the order is delivered
    delivery_date = models.DateTimeField(default=timezone.now)
    estimated_delivery_minutes = models.PositiveIntegerField(default=45)
    caterer_ids = models.JSONField(default=list, blank=True)
    delivery_person_id = models.CharField(max_length=128, null=True, blank=True, db_index=True)
    version = models.PositiveIntegerField(default=1)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Order")
        verbose_name_plural = _("Orders")
        ordering = ["-order_date"]
        indexes = [
            models.Index(fields=["status", "delivery_person_id"], name="order_status_delivery_idx"),
            models.Index(fields=["client_id", "order_date"], name="order_client_date_idx"),
        ]

    def __str__(self):
        return f"Order {self.short_id} ({self.status})"

    @property
    def short_id(self) -> str:
        return str(self.id)[:5]


class OrderItem(models.Model):
    """A line of an order. Immutable once the order is placed."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    meal_id = models.CharField(max_length=128)
    meal_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    caterer_id = models.CharField(max_length=128, db_index=True)

    class Meta:
        verbose_name = _("Order Item")
        verbose_name_plural = _("Order Items")
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=Q(quantity__gte=1), name="order_item_quantity_positive"),
            models.CheckConstraint(condition=Q(unit_price__gte=0), name="order_item_price_non_negative"),
        ]

    def __str__(self):
        return f"{self.quantity} x {self.meal_name}"

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity

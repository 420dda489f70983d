import django_filters

from core_backend.base.filters import BaseFilterSet, FlexibleDateTimeFilter
from .models import Order


class OrderFilter(BaseFilterSet):
    """
    Filters for order listings.

    ``order_date__gte`` / ``order_date__lte`` accept either a date or a
    full datetime; a date-only upper bound covers the whole day.
    """

    status = django_filters.MultipleChoiceFilter(choices=Order.OrderStatus.choices)
    order_date__gte = FlexibleDateTimeFilter(field_name="order_date", lookup_expr="gte")
    order_date__lte = FlexibleDateTimeFilter(field_name="order_date", lookup_expr="lte")

    class Meta:
        model = Order
        fields = ["status", "delivery_person_id"]

"""
Order status transition table.

pending -> in_preparation -> ready_for_delivery -> in_delivery -> delivered,
with cancelled reachable from every non-terminal status. delivered and
cancelled are terminal.
"""
from .exceptions import IllegalTransitionError, OrderValidationError
from .models import Order

Status = Order.OrderStatus

ALLOWED_TRANSITIONS = {
    Status.PENDING: frozenset({Status.IN_PREPARATION, Status.CANCELLED}),
    Status.IN_PREPARATION: frozenset({Status.READY_FOR_DELIVERY, Status.CANCELLED}),
    Status.READY_FOR_DELIVERY: frozenset({Status.IN_DELIVERY, Status.CANCELLED}),
    Status.IN_DELIVERY: frozenset({Status.DELIVERED, Status.CANCELLED}),
    Status.DELIVERED: frozenset(),
    Status.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def coerce_status(value) -> Status:
    """Maps a raw value onto the status enum, rejecting unknown values."""
    try:
        return Status(value)
    except ValueError:
        raise OrderValidationError(f"'{value}' is not a valid order status.")


def resolve_transition(current, requested) -> Status:
    """
    Returns the status an order moves to, or raises IllegalTransitionError.

    Pure: it only consults the transition table.
    """
    current = coerce_status(current)
    requested = coerce_status(requested)
    if requested not in ALLOWED_TRANSITIONS[current]:
        raise IllegalTransitionError(current, requested)
    return requested

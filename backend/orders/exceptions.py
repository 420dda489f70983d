"""
Custom exceptions for the order lifecycle.

Not-found and validation errors are raised before anything is written.
PlacementError / StatusUpdateError wrap storage failures, which callers may
retry; the low-level cause is logged, not exposed.
"""


class OrderError(Exception):
    """Base exception for order errors."""
    pass


class OrderNotFoundError(OrderError):
    """Raised when an order id does not exist."""

    def __init__(self, order_id, message=None):
        self.order_id = order_id
        if message is None:
            message = f"Order {order_id} not found."
        super().__init__(message)


class OrderValidationError(OrderError):
    """Raised when order input is malformed (empty items, bad quantity, unknown status...)."""
    pass


class IllegalTransitionError(OrderError):
    """Raised when a status change is not in the transition table."""

    def __init__(self, current, requested, message=None):
        self.current = current
        self.requested = requested
        if message is None:
            message = f"Cannot transition order from {current} to {requested}."
        super().__init__(message)


class StaleOrderError(OrderError):
    """Raised when the order changed since the caller last read it."""

    def __init__(self, order_id, expected_version=None, actual_version=None, message=None):
        self.order_id = order_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        if message is None:
            message = f"Order {order_id} was modified concurrently; refresh and retry."
        super().__init__(message)


class DeliveryPersonUnavailableError(OrderError):
    """Raised when a delivery person cannot take the order (unknown, not approved, or already bound)."""
    pass


class OrderPlacementError(OrderError):
    """Raised when the atomic placement write fails."""
    pass


class StatusUpdateError(OrderError):
    """Raised when the status write fails."""
    pass

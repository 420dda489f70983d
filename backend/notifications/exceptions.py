"""
Custom exceptions for the notification system.
"""


class NotificationError(Exception):
    """Base exception for notification errors (storage failures included)."""
    pass


class NotificationValidationError(NotificationError):
    """Raised when a notification is requested with an empty recipient or message."""
    pass


class NotificationNotFoundError(NotificationError):
    """Raised when a notification id does not exist."""

    def __init__(self, notification_id, message=None):
        self.notification_id = notification_id
        if message is None:
            message = f"Notification {notification_id} not found."
        super().__init__(message)

from datetime import timedelta
from typing import List, Optional
import logging
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.utils import timezone

from .exceptions import NotificationError, NotificationNotFoundError, NotificationValidationError
from .models import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Inbox operations for clients, caterers and delivery people.

    Creation never swallows storage errors; callers that treat a notification
    as a best-effort side effect use ``notify_safely`` instead.
    """

    @staticmethod
    def create(recipient_id: str, message: str) -> uuid.UUID:
        """
        Stores a new unread notification and returns its id.

        Duplicates are allowed; callers decide how often to notify.
        """
        if not recipient_id or not str(recipient_id).strip():
            raise NotificationValidationError("A notification needs a recipient.")
        if not message or not str(message).strip():
            raise NotificationValidationError("A notification needs a message.")

        try:
            notification = Notification.objects.create(
                recipient_id=recipient_id,
                message=message,
                read=False,
                read_at=None,
            )
        except DatabaseError as e:
            logger.error(f"Error creating notification for {recipient_id}: {e}", exc_info=True)
            raise NotificationError("Could not create notification.") from e

        logger.debug(f"Created notification {notification.id} for {recipient_id}")
        return notification.id

    @staticmethod
    def notify_safely(recipient_id: str, message: str) -> Optional[uuid.UUID]:
        """
        Fire-and-forget variant of ``create``.

        Used after a business write has committed: a failure here is logged
        and never propagated to the caller.
        """
        try:
            return NotificationService.create(recipient_id, message)
        except NotificationError as e:
            logger.warning(f"Notification to {recipient_id} was not delivered: {e}")
            return None

    @staticmethod
    def list_unread(recipient_id: str) -> List[Notification]:
        """Unread notifications for a recipient, newest first."""
        return list(
            Notification.objects.filter(recipient_id=recipient_id, read=False).order_by("-created_at")
        )

    @staticmethod
    def list_recent(recipient_id: str, limit: Optional[int] = None) -> List[Notification]:
        """Most recent notifications (read or not) for a recipient, newest first."""
        if limit is None:
            limit = getattr(settings, "NOTIFICATION_RECENT_LIMIT", 20)
        return list(
            Notification.objects.filter(recipient_id=recipient_id).order_by("-created_at")[:limit]
        )

    @staticmethod
    def mark_read(notification_id, now=None) -> None:
        """
        Marks a notification as read.

        Marking an already-read notification stamps ``read_at`` again.
        """
        now = now or timezone.now()
        try:
            updated = Notification.objects.filter(id=notification_id).update(read=True, read_at=now)
        except (ValidationError, ValueError):
            # Malformed ids cannot match any row
            raise NotificationNotFoundError(notification_id)
        except DatabaseError as e:
            logger.error(f"Error marking notification {notification_id} as read: {e}", exc_info=True)
            raise NotificationError("Could not update the notification.") from e

        if updated == 0:
            raise NotificationNotFoundError(notification_id)

    @staticmethod
    def cleanup_expired(now=None) -> int:
        """
        Deletes read notifications whose ``read_at`` is older than the
        retention window. Returns the number of rows removed.

        A single conditional DELETE, so overlapping sweeps simply find
        nothing left to remove.
        """
        now = now or timezone.now()
        retention_hours = getattr(settings, "NOTIFICATION_RETENTION_HOURS", 24)
        cutoff = now - timedelta(hours=retention_hours)

        try:
            deleted, _ = Notification.objects.filter(read=True, read_at__lt=cutoff).delete()
        except DatabaseError as e:
            logger.error(f"Error purging expired notifications: {e}", exc_info=True)
            raise NotificationError("Could not purge expired notifications.") from e

        if deleted:
            logger.info(f"Purged {deleted} read notifications older than {retention_hours}h")
        return deleted

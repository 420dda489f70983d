from celery import shared_task
import logging

logger = logging.getLogger(__name__)


@shared_task
def cleanup_expired_notifications():
    """
    Hard-delete read notifications past the retention window.

    This task runs hourly via Celery Beat.

    Returns:
        str: Status message with count of purged notifications
    """
    from .services import NotificationService

    try:
        count = NotificationService.cleanup_expired()

        if count == 0:
            logger.info("No expired notifications to purge")
            return "No expired notifications to purge"

        message = f"Purged {count} expired notifications"
        logger.info(message)
        return message

    except Exception as e:
        error_msg = f"Error purging expired notifications: {e}"
        logger.error(error_msg, exc_info=True)
        raise

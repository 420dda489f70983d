from django.core.management.base import BaseCommand

from notifications.services import NotificationService


class Command(BaseCommand):
    help = "Delete read notifications older than NOTIFICATION_RETENTION_HOURS."

    def handle(self, *args, **options):
        count = NotificationService.cleanup_expired()
        self.stdout.write(self.style.SUCCESS(f"Purged {count} expired notifications."))

import os

from celery import Celery
from celery.schedules import crontab

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core_backend.settings")

app = Celery("core_backend")

# All celery-related settings use the CELERY_ prefix in settings.py
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()

app.conf.beat_schedule = {
    # Read notifications past the retention window are purged hourly.
    "cleanup-expired-notifications": {
        "task": "notifications.tasks.cleanup_expired_notifications",
        "schedule": crontab(minute=0),
    },
}

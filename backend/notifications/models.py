import uuid

from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Notification(models.Model):
    """
    A single message addressed to one recipient.

    Recipients are clients, caterers or delivery people; the type is not
    stored, only the uid. ``read_at`` is set exactly when ``read`` is True.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    recipient_id = models.CharField(
        max_length=128,
        db_index=True,
        help_text=_("UID of the user this notification is addressed to"),
    )
    message = models.TextField()
    created_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)
    read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = _("Notification")
        verbose_name_plural = _("Notifications")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["recipient_id", "read"], name="notif_recipient_read_idx"),
            models.Index(fields=["read", "read_at"], name="notif_read_read_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(read=True, read_at__isnull=False) | Q(read=False, read_at__isnull=True),
                name="notification_read_at_matches_read",
            ),
        ]

    def __str__(self):
        state = "read" if self.read else "unread"
        return f"Notification to {self.recipient_id} ({state})"

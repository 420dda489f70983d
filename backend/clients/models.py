from django.db import models
from django.utils.translation import gettext_lazy as _


class DailyIntakeLog(models.Model):
    """
    What a client ordered on one calendar day.

    ``entries`` is a denormalized list of ``{"meal_id", "meal_name", "quantity"}``
    written at order time and read by the nutrition dashboard.
    """

    client_id = models.CharField(max_length=128)
    date = models.DateField()
    entries = models.JSONField(default=list, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Daily Intake Log")
        verbose_name_plural = _("Daily Intake Logs")
        ordering = ["-date"]
        constraints = [
            models.UniqueConstraint(fields=["client_id", "date"], name="unique_intake_log_per_client_day"),
        ]

    def __str__(self):
        return f"Intake log {self.client_id} {self.date}"

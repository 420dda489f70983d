import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("recipient_id", models.CharField(db_index=True, help_text="UID of the user this notification is addressed to", max_length=128)),
                ("message", models.TextField()),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ("read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "Notification",
                "verbose_name_plural": "Notifications",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["recipient_id", "read"], name="notif_recipient_read_idx"),
                    models.Index(fields=["read", "read_at"], name="notif_read_read_at_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(models.Q(("read", True), ("read_at__isnull", False)), models.Q(("read", False), ("read_at__isnull", True)), _connector="OR"),
                        name="notification_read_at_matches_read",
                    ),
                ],
            },
        ),
    ]

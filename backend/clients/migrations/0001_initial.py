from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DailyIntakeLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("client_id", models.CharField(max_length=128)),
                ("date", models.DateField()),
                ("entries", models.JSONField(blank=True, default=list)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Daily Intake Log",
                "verbose_name_plural": "Daily Intake Logs",
                "ordering": ["-date"],
                "constraints": [
                    models.UniqueConstraint(fields=("client_id", "date"), name="unique_intake_log_per_client_day"),
                ],
            },
        ),
    ]

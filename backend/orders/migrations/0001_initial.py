import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("client_id", models.CharField(db_index=True, max_length=128)),
                ("client_name", models.CharField(max_length=255)),
                ("delivery_address", models.TextField()),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("status", models.CharField(choices=[("pending", "Pending"), ("in_preparation", "In Preparation"), ("ready_for_delivery", "Ready for Delivery"), ("in_delivery", "In Delivery"), ("delivered", "Delivered"), ("cancelled", "Cancelled")], db_index=True, default="pending", max_length=30)),
                ("order_date", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("delivery_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("estimated_delivery_minutes", models.PositiveIntegerField(default=45)),
                ("caterer_ids", models.JSONField(blank=True, default=list)),
                ("delivery_person_id", models.CharField(blank=True, db_index=True, max_length=128, null=True)),
                ("version", models.PositiveIntegerField(default=1)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Order",
                "verbose_name_plural": "Orders",
                "ordering": ["-order_date"],
                "indexes": [
                    models.Index(fields=["status", "delivery_person_id"], name="order_status_delivery_idx"),
                    models.Index(fields=["client_id", "order_date"], name="order_client_date_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("meal_id", models.CharField(max_length=128)),
                ("meal_name", models.CharField(max_length=255)),
                ("quantity", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("caterer_id", models.CharField(db_index=True, max_length=128)),
                ("order", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="items", to="orders.order")),
            ],
            options={
                "verbose_name": "Order Item",
                "verbose_name_plural": "Order Items",
                "ordering": ["id"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("quantity__gte", 1)), name="order_item_quantity_positive"),
                    models.CheckConstraint(condition=models.Q(("unit_price__gte", 0)), name="order_item_price_non_negative"),
                ],
            },
        ),
    ]

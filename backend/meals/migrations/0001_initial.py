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
            name="Meal",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(choices=[("breakfast", "Breakfast"), ("lunch", "Lunch"), ("dinner", "Dinner"), ("snack", "Snack")], db_index=True, max_length=20)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("caterer_id", models.CharField(db_index=True, help_text="UID of the caterer who created the meal", max_length=128)),
                ("available", models.BooleanField(default=True)),
                ("rating_average", models.FloatField(default=0.0)),
                ("rating_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
            ],
            options={
                "verbose_name": "Meal",
                "verbose_name_plural": "Meals",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="MealRating",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=128)),
                ("rating", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("rated_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("meal", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="user_ratings", to="meals.meal")),
            ],
            options={
                "verbose_name": "Meal Rating",
                "verbose_name_plural": "Meal Ratings",
                "constraints": [
                    models.UniqueConstraint(fields=("meal", "user_id"), name="unique_rating_per_user_meal"),
                ],
            },
        ),
        migrations.CreateModel(
            name="FavoriteMeal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("client_id", models.CharField(db_index=True, max_length=128)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("meal", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="favorited_by", to="meals.meal")),
            ],
            options={
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("client_id", "meal"), name="unique_favorite_per_client_meal"),
                ],
            },
        ),
    ]

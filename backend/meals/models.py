import uuid
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Meal(models.Model):
    """
    A meal offered by a caterer.

    ``rating_average`` / ``rating_count`` are maintained by
    ``MealRatingService`` and must not be written anywhere else.
    """

    class Category(models.TextChoices):
        BREAKFAST = "breakfast", _("Breakfast")
        LUNCH = "lunch", _("Lunch")
        DINNER = "dinner", _("Dinner")
        SNACK = "snack", _("Snack")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=20, choices=Category.choices, db_index=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    caterer_id = models.CharField(
        max_length=128,
        db_index=True,
        help_text=_("UID of the caterer who created the meal"),
    )
    available = models.BooleanField(default=True)
    rating_average = models.FloatField(default=0.0)
    rating_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        verbose_name = _("Meal")
        verbose_name_plural = _("Meals")
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class MealRating(models.Model):
    """One user's star rating for one meal."""

    meal = models.ForeignKey(Meal, on_delete=models.CASCADE, related_name="user_ratings")
    user_id = models.CharField(max_length=128)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    rated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Meal Rating")
        verbose_name_plural = _("Meal Ratings")
        constraints = [
            models.UniqueConstraint(fields=["meal", "user_id"], name="unique_rating_per_user_meal"),
        ]

    def __str__(self):
        return f"{self.user_id} rated {self.meal_id}: {self.rating}"


class FavoriteMeal(models.Model):
    client_id = models.CharField(max_length=128, db_index=True)
    meal = models.ForeignKey(Meal, on_delete=models.CASCADE, related_name="favorited_by")
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["client_id", "meal"], name="unique_favorite_per_client_meal"),
        ]

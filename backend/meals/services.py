from typing import List
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from .exceptions import InvalidRatingError, MealNotFoundError, RatingError
from .models import FavoriteMeal, Meal, MealRating

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def _get_meal(meal_id, for_update=False) -> Meal:
    queryset = Meal.objects.select_for_update() if for_update else Meal.objects.all()
    try:
        return queryset.get(id=meal_id)
    except (Meal.DoesNotExist, ValidationError, ValueError):
        raise MealNotFoundError(meal_id)


class MealRatingService:
    """Keeps the running star-rating average on each meal."""

    @staticmethod
    def validate_rating(rating) -> int:
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise InvalidRatingError(rating)
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidRatingError(rating)
        return rating

    @staticmethod
    def rate(meal_id, user_id: str, rating: int) -> Meal:
        """
        Adds or replaces ``user_id``'s rating of a meal.

        The meal row is locked for the whole read-modify-write so ratings
        from different users serialize. A re-rate swaps the old value out
        of the sum instead of counting the user twice.
        """
        MealRatingService.validate_rating(rating)

        try:
            with transaction.atomic():
                meal = _get_meal(meal_id, for_update=True)
                existing = (
                    MealRating.objects.select_for_update()
                    .filter(meal=meal, user_id=user_id)
                    .first()
                )

                prior_sum = meal.rating_average * meal.rating_count
                if existing is not None:
                    new_sum = prior_sum - existing.rating + rating
                    new_count = meal.rating_count
                else:
                    new_sum = prior_sum + rating
                    new_count = meal.rating_count + 1

                MealRating.objects.update_or_create(
                    meal=meal,
                    user_id=user_id,
                    defaults={"rating": rating, "rated_at": timezone.now()},
                )

                meal.rating_average = new_sum / new_count
                meal.rating_count = new_count
                meal.save(update_fields=["rating_average", "rating_count"])
        except DatabaseError as e:
            logger.error(f"Error rating meal {meal_id} by {user_id}: {e}", exc_info=True)
            raise RatingError("Could not save the rating.") from e

        logger.info(
            f"Meal {meal.id} rated {rating} by {user_id} "
            f"(average {meal.rating_average:.2f} over {meal.rating_count})"
        )
        return meal


class FavoriteService:
    """Client favorites. Add and remove are idempotent; toggle flips the state."""

    @staticmethod
    def add(client_id: str, meal_id) -> None:
        meal = _get_meal(meal_id)
        FavoriteMeal.objects.get_or_create(client_id=client_id, meal=meal)

    @staticmethod
    def remove(client_id: str, meal_id) -> None:
        meal = _get_meal(meal_id)
        FavoriteMeal.objects.filter(client_id=client_id, meal=meal).delete()

    @staticmethod
    @transaction.atomic
    def toggle(client_id: str, meal_id) -> bool:
        """Returns True if the meal is a favorite after the call."""
        meal = _get_meal(meal_id)
        deleted, _ = FavoriteMeal.objects.filter(client_id=client_id, meal=meal).delete()
        if deleted:
            return False
        FavoriteMeal.objects.get_or_create(client_id=client_id, meal=meal)
        return True

    @staticmethod
    def list_favorites(client_id: str) -> List[Meal]:
        return list(
            Meal.objects.filter(favorited_by__client_id=client_id).order_by("-favorited_by__created_at")
        )

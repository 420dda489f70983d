"""
Custom exceptions for the meal catalog.
"""


class MealError(Exception):
    """Base exception for meal errors (storage failures included)."""
    pass


class MealNotFoundError(MealError):
    """Raised when a meal id does not exist."""

    def __init__(self, meal_id, message=None):
        self.meal_id = meal_id
        if message is None:
            message = f"Meal {meal_id} not found."
        super().__init__(message)


class InvalidRatingError(MealError):
    """Raised when a rating is outside the 1-5 star range."""

    def __init__(self, rating, message=None):
        self.rating = rating
        if message is None:
            message = f"Rating must be an integer between 1 and 5, got {rating!r}."
        super().__init__(message)


class RatingError(MealError):
    """Raised when a rating could not be stored."""
    pass

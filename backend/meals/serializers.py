from rest_framework import serializers

from core_backend.base import BaseModelSerializer, StrictInputSerializer
from .models import Meal


class MealSerializer(BaseModelSerializer):
    class Meta:
        model = Meal
        fields = [
            "id",
            "name",
            "description",
            "category",
            "price",
            "caterer_id",
            "available",
            "rating_average",
            "rating_count",
            "created_at",
        ]
        read_only_fields = ["id", "rating_average", "rating_count", "created_at"]


class RateMealSerializer(StrictInputSerializer):
    rating = serializers.IntegerField(min_value=1, max_value=5)


class MealRatingSummarySerializer(serializers.Serializer):
    meal_id = serializers.UUIDField(source="id")
    average = serializers.FloatField(source="rating_average")
    count = serializers.IntegerField(source="rating_count")

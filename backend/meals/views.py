from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
import logging

from core_backend.base import ReadOnlyBaseViewSet
from .exceptions import InvalidRatingError, MealError, MealNotFoundError
from .models import Meal
from .serializers import MealRatingSummarySerializer, MealSerializer, RateMealSerializer
from .services import FavoriteService, MealRatingService

logger = logging.getLogger(__name__)


class MealViewSet(ReadOnlyBaseViewSet):
    """
    Meal catalog with rating and favorite actions.

    Endpoints:
    - GET /api/meals/ - List meals (?category=, ?caterer_id=, ?available=)
    - GET /api/meals/<id>/ - Meal detail
    - POST /api/meals/<id>/rating/ - Rate a meal 1-5 as the caller
    - POST /api/meals/<id>/favorite/ - Toggle the meal in the caller's favorites
    - GET /api/meals/favorites/ - The caller's favorite meals
    """

    queryset = Meal.objects.all()
    serializer_class = MealSerializer
    filterset_fields = ["category", "caterer_id", "available"]

    def get_queryset(self):
        return super().get_queryset().order_by("-created_at")

    @action(detail=True, methods=["post"], url_path="rating")
    def rating(self, request, pk=None):
        serializer = RateMealSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            meal = MealRatingService.rate(pk, request.user.uid, serializer.validated_data["rating"])
        except MealNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidRatingError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except MealError as e:
            return Response({"error": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(MealRatingSummarySerializer(meal).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=["post"], url_path="favorite")
    def favorite(self, request, pk=None):
        try:
            is_favorite = FavoriteService.toggle(request.user.uid, pk)
        except MealNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({"meal_id": pk, "is_favorite": is_favorite}, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path="favorites")
    def favorites(self, request):
        meals = FavoriteService.list_favorites(request.user.uid)
        return Response(MealSerializer(meals, many=True).data)

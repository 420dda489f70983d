from rest_framework import viewsets
from django_filters.rest_framework import DjangoFilterBackend
from ..pagination import StandardPagination
from .mixins import OptimizedQuerysetMixin


class ReadOnlyBaseViewSet(OptimizedQuerysetMixin, viewsets.ReadOnlyModelViewSet):
    """
    Base ViewSet for read-only endpoints.

    Features:
    - Standard pagination and filtering
    - select_related / prefetch_related taken from the serializer Meta hints

    Usage:
        class MealViewSet(ReadOnlyBaseViewSet):
            queryset = Meal.objects.all()
            serializer_class = MealSerializer
    """

    pagination_class = StandardPagination
    filter_backends = [DjangoFilterBackend]

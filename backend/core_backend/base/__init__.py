"""
Core backend base components.

This package provides foundational classes and utilities that should be used
throughout the Django application for consistency and maintainability.
"""

from .mixins import OptimizedQuerysetMixin
from .viewsets import ReadOnlyBaseViewSet
from .serializers import BaseModelSerializer, StrictInputSerializer
from .filters import BaseFilterSet, FlexibleDateTimeFilter

__all__ = [
    # ViewSets
    'OptimizedQuerysetMixin',
    'ReadOnlyBaseViewSet',

    # Serializers
    'BaseModelSerializer',
    'StrictInputSerializer',

    # Filters
    'BaseFilterSet',
    'FlexibleDateTimeFilter',
]

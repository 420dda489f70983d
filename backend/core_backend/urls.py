"""
URL configuration for core_backend project.
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse({"status": "ok", "message": "Backend is running"})


urlpatterns = [
    path("api/health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    # The orders app registers both the orders/ and delivery/ prefixes.
    path("api/", include("orders.urls")),
    path("api/meals/", include("meals.urls")),
    path("api/notifications/", include("notifications.urls")),
]

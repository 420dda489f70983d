from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
import logging

from core_backend.base import ReadOnlyBaseViewSet
from .exceptions import NotificationError, NotificationNotFoundError
from .models import Notification
from .serializers import NotificationSerializer
from .services import NotificationService

logger = logging.getLogger(__name__)


class NotificationViewSet(ReadOnlyBaseViewSet):
    """
    The caller's notification inbox.

    Endpoints:
    - GET /api/notifications/ - Unread notifications, newest first
    - GET /api/notifications/?all=1 - The most recent notifications (NOTIFICATION_RECENT_LIMIT), read or not
    - POST /api/notifications/<id>/read/ - Mark one notification as read
    """

    queryset = Notification.objects.all()
    serializer_class = NotificationSerializer

    def get_queryset(self):
        return super().get_queryset().filter(recipient_id=self.request.user.uid).order_by("-created_at")

    def list(self, request):
        uid = request.user.uid
        if request.query_params.get("all") in ("1", "true"):
            notifications = NotificationService.list_recent(uid)
        else:
            notifications = NotificationService.list_unread(uid)

        page = self.paginate_queryset(notifications)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=True, methods=["post"], url_path="read")
    def read(self, request, pk=None):
        notification = self.get_object()
        try:
            NotificationService.mark_read(notification.id)
        except NotificationNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except NotificationError as e:
            return Response({"error": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        notification.refresh_from_db()
        return Response(self.get_serializer(notification).data)

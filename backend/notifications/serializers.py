from core_backend.base import BaseModelSerializer
from .models import Notification


class NotificationSerializer(BaseModelSerializer):
    class Meta:
        model = Notification
        fields = ["id", "recipient_id", "message", "created_at", "read", "read_at"]
        read_only_fields = fields

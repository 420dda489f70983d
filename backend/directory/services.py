from typing import List
import logging

from django.db import transaction

from notifications.services import NotificationService
from .exceptions import DirectoryEntryNotFoundError, DirectoryError
from .models import ApprovalStatus, Caterer, DeliveryPerson

logger = logging.getLogger(__name__)


REVIEW_MESSAGES = {
    ApprovalStatus.APPROVED: "Your {kind} account has been approved.",
    ApprovalStatus.REJECTED: "Your {kind} account application has been rejected.",
}


class DirectoryService:
    """Lookups and admin review for caterers and delivery people."""

    @staticmethod
    def approved_caterer_ids_in_region(region: str) -> List[str]:
        """UIDs of approved caterers serving ``region``."""
        return list(
            Caterer.objects.filter(region=region, status=ApprovalStatus.APPROVED)
            .values_list("uid", flat=True)
        )

    @staticmethod
    def get_delivery_person(uid: str) -> DeliveryPerson:
        try:
            return DeliveryPerson.objects.get(uid=uid)
        except DeliveryPerson.DoesNotExist:
            raise DirectoryEntryNotFoundError("Delivery person", uid)

    @staticmethod
    def is_approved_delivery_person(uid: str) -> bool:
        return DeliveryPerson.objects.filter(uid=uid, status=ApprovalStatus.APPROVED).exists()

    @staticmethod
    def review_caterer(uid: str, status: str) -> Caterer:
        return DirectoryService._review(Caterer, "caterer", uid, status)

    @staticmethod
    def review_delivery_person(uid: str, status: str) -> DeliveryPerson:
        return DirectoryService._review(DeliveryPerson, "delivery", uid, status)

    @staticmethod
    def _review(model, kind: str, uid: str, status: str):
        """
        Applies an admin decision (approved / rejected) and tells the
        partner once the change is committed.
        """
        if status not in (ApprovalStatus.APPROVED, ApprovalStatus.REJECTED):
            raise DirectoryError(f"'{status}' is not a review decision.")

        with transaction.atomic():
            try:
                entry = model.objects.select_for_update().get(uid=uid)
            except model.DoesNotExist:
                raise DirectoryEntryNotFoundError(model._meta.verbose_name.title(), uid)

            entry.status = status
            entry.save(update_fields=["status", "updated_at"])

            message = REVIEW_MESSAGES[status].format(kind=kind)
            transaction.on_commit(lambda: NotificationService.notify_safely(uid, message))

        logger.info(f"{model.__name__} {uid} reviewed: {status}")
        return entry

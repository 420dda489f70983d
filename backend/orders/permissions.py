from rest_framework import permissions

from directory.services import DirectoryService
from .models import Order

Status = Order.OrderStatus

# Statuses each side of an order may move it to. Whether the move is legal
# from the current status is still up to the transition table.
CLIENT_STATUS_TARGETS = frozenset({Status.CANCELLED})
CATERER_STATUS_TARGETS = frozenset({Status.IN_PREPARATION, Status.READY_FOR_DELIVERY, Status.CANCELLED})
DELIVERY_PERSON_STATUS_TARGETS = frozenset({Status.IN_DELIVERY, Status.DELIVERED})


def status_targets_for(order, uid):
    """Statuses ``uid`` may request for ``order``, across every role it holds on it."""
    targets = set()
    if order.client_id == uid:
        targets |= CLIENT_STATUS_TARGETS
    if uid in (order.caterer_ids or []):
        targets |= CATERER_STATUS_TARGETS
    if order.delivery_person_id and order.delivery_person_id == uid:
        targets |= DELIVERY_PERSON_STATUS_TARGETS
    return targets


class IsOrderParticipant(permissions.BasePermission):
    """
    Allows access to an order for:
    - The client who placed it
    - Any caterer with items in it
    - The delivery person bound to it
    - Approved delivery people while it waits unassigned in the delivery pool
    """

    def has_object_permission(self, request, view, obj):
        uid = request.user.uid
        if obj.client_id == uid or uid in (obj.caterer_ids or []):
            return True
        if obj.delivery_person_id:
            return obj.delivery_person_id == uid
        return (
            obj.status == Status.READY_FOR_DELIVERY
            and DirectoryService.is_approved_delivery_person(uid)
        )


class IsApprovedDeliveryPerson(permissions.BasePermission):
    """Only delivery people an admin has approved."""

    message = "Only approved delivery people can access delivery orders."

    def has_permission(self, request, view):
        return bool(
            request.user
            and request.user.is_authenticated
            and DirectoryService.is_approved_delivery_person(request.user.uid)
        )

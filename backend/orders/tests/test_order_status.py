"""
Order Status Tests

The status state machine: legal transitions only, optimistic version
checks, delivery-person binding, and the notifications each change emits.
"""
import uuid
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from core_backend.tests.fixtures import CLIENT_ID, REGION
from notifications.models import Notification
from orders.exceptions import (
    DeliveryPersonUnavailableError,
    IllegalTransitionError,
    OrderNotFoundError,
    OrderValidationError,
    StaleOrderError,
    StatusUpdateError,
)
from orders.models import Order
from orders.services import DeliveryQueryService, OrderStatusService
from orders.transitions import ALLOWED_TRANSITIONS, TERMINAL_STATUSES, resolve_transition

Status = Order.OrderStatus


def advance(order, *statuses):
    for status in statuses:
        order = OrderStatusService.update_status(order.id, status)
    return order


class TestTransitionTable:

    def test_happy_path_is_allowed(self):
        path = [
            Status.PENDING,
            Status.IN_PREPARATION,
            Status.READY_FOR_DELIVERY,
            Status.IN_DELIVERY,
            Status.DELIVERED,
        ]
        for current, requested in zip(path, path[1:]):
            assert resolve_transition(current, requested) == requested

    @pytest.mark.parametrize('status', [s for s in Status if s not in TERMINAL_STATUSES])
    def test_cancel_from_any_open_status(self, status):
        assert resolve_transition(status, Status.CANCELLED) == Status.CANCELLED

    def test_terminal_statuses(self):
        assert TERMINAL_STATUSES == {Status.DELIVERED, Status.CANCELLED}

    @pytest.mark.parametrize('current,requested', [
        (Status.PENDING, Status.DELIVERED),
        (Status.PENDING, Status.PENDING),
        (Status.IN_DELIVERY, Status.IN_PREPARATION),
        (Status.DELIVERED, Status.CANCELLED),
        (Status.CANCELLED, Status.PENDING),
    ])
    def test_illegal_transitions(self, current, requested):
        with pytest.raises(IllegalTransitionError):
            resolve_transition(current, requested)

    def test_unknown_status(self):
        with pytest.raises(OrderValidationError):
            resolve_transition(Status.PENDING, 'lost')

    def test_every_status_has_an_entry(self):
        assert set(ALLOWED_TRANSITIONS) == set(Status)


@pytest.mark.django_db
class TestUpdateStatus:

    def test_update_persists_and_bumps_version(self, placed_order):
        order = OrderStatusService.update_status(placed_order.id, Status.IN_PREPARATION)

        placed_order.refresh_from_db()
        assert order.status == placed_order.status == Status.IN_PREPARATION
        assert placed_order.version == 2

    def test_illegal_transition_changes_nothing(self, placed_order):
        with pytest.raises(IllegalTransitionError):
            OrderStatusService.update_status(placed_order.id, Status.DELIVERED)

        placed_order.refresh_from_db()
        assert placed_order.status == Status.PENDING
        assert placed_order.version == 1

    def test_unknown_order(self, db):
        with pytest.raises(OrderNotFoundError):
            OrderStatusService.update_status(uuid.uuid4(), Status.IN_PREPARATION)

    def test_malformed_order_id(self, db):
        with pytest.raises(OrderNotFoundError):
            OrderStatusService.update_status('not-a-uuid', Status.IN_PREPARATION)

    def test_delivered_stamps_delivery_date(self, placed_order, delivery_person):
        advance(placed_order, Status.IN_PREPARATION)
        OrderStatusService.update_status(
            placed_order.id, Status.READY_FOR_DELIVERY, delivery_person_id='delivery-1'
        )
        order = advance(placed_order, Status.IN_DELIVERY, Status.DELIVERED)

        order.refresh_from_db()
        assert order.status == Status.DELIVERED
        assert order.delivery_date > placed_order.order_date

    def test_storage_failure_is_wrapped(self, placed_order):
        with patch.object(Order.objects, 'filter', side_effect=DatabaseError('locked')):
            with pytest.raises(StatusUpdateError) as exc_info:
                OrderStatusService.update_status(placed_order.id, Status.IN_PREPARATION)

        assert str(exc_info.value) == 'Could not update the order status.'
        placed_order.refresh_from_db()
        assert placed_order.status == Status.PENDING


@pytest.mark.django_db
class TestOptimisticConcurrency:

    def test_matching_version_succeeds(self, placed_order):
        order = OrderStatusService.update_status(placed_order.id, Status.IN_PREPARATION, expected_version=1)

        assert order.version == 2

    def test_stale_version_is_rejected(self, placed_order):
        OrderStatusService.update_status(placed_order.id, Status.IN_PREPARATION, expected_version=1)

        with pytest.raises(StaleOrderError) as exc_info:
            OrderStatusService.update_status(placed_order.id, Status.CANCELLED, expected_version=1)

        assert exc_info.value.actual_version == 2
        placed_order.refresh_from_db()
        assert placed_order.status == Status.IN_PREPARATION

    def test_concurrent_write_between_read_and_update_is_detected(self, placed_order):
        """A writer that bumps the version after our read makes our UPDATE match no row."""
        Order.objects.filter(id=placed_order.id).update(version=5)

        with patch('orders.services.status_service.get_order') as get_order:
            stale = Order.objects.get(id=placed_order.id)
            stale.version = 1
            get_order.return_value = stale

            with pytest.raises(StaleOrderError):
                OrderStatusService.update_status(placed_order.id, Status.IN_PREPARATION)

        placed_order.refresh_from_db()
        assert placed_order.status == Status.PENDING
        assert placed_order.version == 5


@pytest.mark.django_db
class TestDeliveryPersonBinding:

    def test_binding_on_ready_for_delivery(self, placed_order, delivery_person):
        advance(placed_order, Status.IN_PREPARATION)

        order = OrderStatusService.update_status(
            placed_order.id, Status.READY_FOR_DELIVERY, delivery_person_id='delivery-1'
        )

        assert order.delivery_person_id == 'delivery-1'
        assert Order.objects.get(id=placed_order.id).delivery_person_id == 'delivery-1'

    def test_unapproved_delivery_person_is_refused(self, placed_order, pending_delivery_person):
        advance(placed_order, Status.IN_PREPARATION)

        with pytest.raises(DeliveryPersonUnavailableError):
            OrderStatusService.update_status(
                placed_order.id, Status.READY_FOR_DELIVERY, delivery_person_id='delivery-pending'
            )

        placed_order.refresh_from_db()
        assert placed_order.status == Status.IN_PREPARATION
        assert placed_order.delivery_person_id is None

    def test_delivery_person_only_accepted_on_ready_for_delivery(self, placed_order, delivery_person):
        with pytest.raises(OrderValidationError):
            OrderStatusService.update_status(
                placed_order.id, Status.IN_PREPARATION, delivery_person_id='delivery-1'
            )

    def test_claim_binds_first_delivery_person_only(self, ready_order, delivery_person, other_delivery_person):
        order = OrderStatusService.claim_for_delivery(ready_order.id, 'delivery-1')
        assert order.delivery_person_id == 'delivery-1'

        with pytest.raises(DeliveryPersonUnavailableError):
            OrderStatusService.claim_for_delivery(ready_order.id, 'delivery-2')

        assert Order.objects.get(id=ready_order.id).delivery_person_id == 'delivery-1'

    def test_claim_requires_ready_order(self, placed_order, delivery_person):
        with pytest.raises(OrderValidationError):
            OrderStatusService.claim_for_delivery(placed_order.id, 'delivery-1')

    def test_claim_requires_approved_person(self, ready_order, pending_delivery_person):
        with pytest.raises(DeliveryPersonUnavailableError):
            OrderStatusService.claim_for_delivery(ready_order.id, 'delivery-pending')

    @pytest.mark.parametrize('target', [Status.IN_DELIVERY, Status.DELIVERED])
    def test_unassigned_order_cannot_leave_for_delivery(self, ready_order, target):
        if target == Status.DELIVERED:
            # Force an unbound in_delivery row to check the last hop too
            Order.objects.filter(id=ready_order.id).update(status=Status.IN_DELIVERY)

        with pytest.raises(DeliveryPersonUnavailableError):
            OrderStatusService.update_status(ready_order.id, target)

        order = Order.objects.get(id=ready_order.id)
        assert order.status != target
        assert order.delivery_person_id is None
        assert order.version == ready_order.version

    def test_unassigned_order_stays_in_pool(self, ready_order, delivery_person):
        with pytest.raises(DeliveryPersonUnavailableError):
            OrderStatusService.update_status(ready_order.id, Status.IN_DELIVERY)

        pool = DeliveryQueryService.list_deliverable_orders(REGION, unassigned_only=True)
        assert [o.id for o in pool] == [ready_order.id]

    def test_claimed_order_can_leave_for_delivery(self, claimed_order):
        order = OrderStatusService.update_status(claimed_order.id, Status.IN_DELIVERY)

        assert order.status == Status.IN_DELIVERY
        assert order.delivery_person_id == 'delivery-1'


@pytest.mark.django_db
class TestStatusNotifications:
    """Each status change notifies the right people, once, after commit."""

    def test_in_preparation_notifies_client(self, placed_order, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.update_status(placed_order.id, Status.IN_PREPARATION)

        notification = Notification.objects.get()
        assert notification.recipient_id == CLIENT_ID
        assert notification.message == f'Your order #{placed_order.short_id}... is being prepared.'

    def test_ready_with_delivery_person_notifies_client_and_driver(
        self, placed_order, delivery_person, django_capture_on_commit_callbacks
    ):
        advance(placed_order, Status.IN_PREPARATION)

        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.update_status(
                placed_order.id, Status.READY_FOR_DELIVERY, delivery_person_id='delivery-1'
            )

        assert Notification.objects.filter(recipient_id=CLIENT_ID).count() == 1
        assert Notification.objects.filter(recipient_id='delivery-1').count() == 1
        assert Notification.objects.count() == 2
        assert Notification.objects.get(recipient_id='delivery-1').message.startswith('New delivery assigned')

    def test_ready_without_delivery_person_notifies_client_only(
        self, placed_order, django_capture_on_commit_callbacks
    ):
        advance(placed_order, Status.IN_PREPARATION)

        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.update_status(placed_order.id, Status.READY_FOR_DELIVERY)

        assert list(Notification.objects.values_list('recipient_id', flat=True)) == [CLIENT_ID]

    def test_in_delivery_sends_nothing(self, claimed_order, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.update_status(claimed_order.id, Status.IN_DELIVERY)

        assert Notification.objects.count() == 0

    def test_delivered_notifies_client_once(self, claimed_order, django_capture_on_commit_callbacks):
        advance(claimed_order, Status.IN_DELIVERY)

        with django_capture_on_commit_callbacks(execute=True):
            order = OrderStatusService.update_status(claimed_order.id, Status.DELIVERED)

        notification = Notification.objects.get()
        assert notification.recipient_id == CLIENT_ID
        assert notification.message.endswith('has been delivered.')
        assert order.delivery_date > claimed_order.order_date

    def test_rejected_transition_notifies_nobody(self, placed_order, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            with pytest.raises(IllegalTransitionError):
                OrderStatusService.update_status(placed_order.id, Status.DELIVERED)

        assert callbacks == []
        assert Notification.objects.count() == 0

    def test_claim_notifies_client(self, ready_order, delivery_person, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            OrderStatusService.claim_for_delivery(ready_order.id, 'delivery-1')

        assert Notification.objects.get().message.endswith('has been assigned to a delivery person.')


@pytest.mark.django_db
class TestCatererOrders:

    def test_caterer_sees_orders_with_its_items(self, placed_order, caterer_elsewhere):
        assert [o.id for o in OrderStatusService.get_orders_for_caterer('caterer-b')] == [placed_order.id]
        assert OrderStatusService.get_orders_for_caterer('caterer-sfax') == []

    def test_status_filter(self, placed_order):
        assert OrderStatusService.get_orders_for_caterer('caterer-a', statuses=[Status.CANCELLED]) == []
        assert len(OrderStatusService.get_orders_for_caterer('caterer-a', statuses=['pending'])) == 1

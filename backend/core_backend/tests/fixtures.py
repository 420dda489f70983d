"""
Shared test fixtures for all backend tests.

This module provides reusable pytest fixtures for common test objects
like partners (caterers, delivery people), meals and placed orders.
"""
import pytest
from decimal import Decimal

from directory.models import ApprovalStatus, Caterer, DeliveryPerson
from meals.models import Meal
from orders.services import OrderPlacementService


REGION = "tunis"
OTHER_REGION = "sfax"


# ============================================================================
# PARTNER FIXTURES
# ============================================================================

@pytest.fixture
def caterer_a(db):
    """Approved caterer A in the default region"""
    return Caterer.objects.create(
        uid='caterer-a',
        name='Chez A',
        email='a@caterers.tn',
        region=REGION,
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def caterer_b(db):
    """Approved caterer B in the default region"""
    return Caterer.objects.create(
        uid='caterer-b',
        name='Chez B',
        email='b@caterers.tn',
        region=REGION,
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def caterer_elsewhere(db):
    """Approved caterer in another region"""
    return Caterer.objects.create(
        uid='caterer-sfax',
        name='Chez Sfax',
        region=OTHER_REGION,
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def pending_caterer(db):
    """Caterer still waiting for admin review"""
    return Caterer.objects.create(
        uid='caterer-pending',
        name='Chez Pending',
        region=REGION,
        status=ApprovalStatus.PENDING,
    )


@pytest.fixture
def delivery_person(db):
    """Approved delivery person D1 in the default region"""
    return DeliveryPerson.objects.create(
        uid='delivery-1',
        name='Driver One',
        region=REGION,
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def other_delivery_person(db):
    """Approved delivery person D2 in the default region"""
    return DeliveryPerson.objects.create(
        uid='delivery-2',
        name='Driver Two',
        region=REGION,
        status=ApprovalStatus.APPROVED,
    )


@pytest.fixture
def pending_delivery_person(db):
    """Delivery person not yet approved"""
    return DeliveryPerson.objects.create(
        uid='delivery-pending',
        name='Driver Pending',
        region=REGION,
        status=ApprovalStatus.PENDING,
    )


# ============================================================================
# MEAL FIXTURES
# ============================================================================

@pytest.fixture
def meal_a1(caterer_a):
    return Meal.objects.create(
        name='Couscous',
        category=Meal.Category.LUNCH,
        price=Decimal('12.50'),
        caterer_id=caterer_a.uid,
    )


@pytest.fixture
def meal_a2(caterer_a):
    return Meal.objects.create(
        name='Brik',
        category=Meal.Category.SNACK,
        price=Decimal('3.00'),
        caterer_id=caterer_a.uid,
    )


@pytest.fixture
def meal_b1(caterer_b):
    return Meal.objects.create(
        name='Lablabi',
        category=Meal.Category.BREAKFAST,
        price=Decimal('5.00'),
        caterer_id=caterer_b.uid,
    )


# ============================================================================
# ORDER FIXTURES
# ============================================================================

CLIENT_ID = 'client-1'


def line_for(meal, quantity=1):
    """Order line payload for a meal."""
    return {
        'meal_id': str(meal.id),
        'meal_name': meal.name,
        'quantity': quantity,
        'unit_price': meal.price,
        'caterer_id': meal.caterer_id,
    }


@pytest.fixture
def order_lines(meal_a1, meal_a2, meal_b1):
    """Three lines from caterers A, A and B"""
    return [line_for(meal_a1, 2), line_for(meal_a2), line_for(meal_b1)]


@pytest.fixture
def placed_order(order_lines):
    """A pending order placed by CLIENT_ID (caterer notifications are not run)"""
    from orders.models import Order

    order_id = OrderPlacementService.place_order(
        client_id=CLIENT_ID,
        client_name='Amira',
        delivery_address='12 Rue de Marseille, Tunis',
        items=order_lines,
        total_price=Decimal('33.00'),
    )
    return Order.objects.get(id=order_id)


@pytest.fixture
def ready_order(placed_order):
    """placed_order moved to ready_for_delivery with nobody assigned"""
    from orders.models import Order

    Order.objects.filter(id=placed_order.id).update(
        status=Order.OrderStatus.READY_FOR_DELIVERY, version=3
    )
    placed_order.refresh_from_db()
    return placed_order


@pytest.fixture
def claimed_order(ready_order, delivery_person):
    """ready_order held by delivery person D1"""
    from orders.models import Order

    Order.objects.filter(id=ready_order.id).update(delivery_person_id=delivery_person.uid, version=4)
    ready_order.refresh_from_db()
    return ready_order

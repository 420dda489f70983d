from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
import logging

from core_backend.base import ReadOnlyBaseViewSet
from orders.exceptions import (
    DeliveryPersonUnavailableError,
    IllegalTransitionError,
    OrderError,
    OrderNotFoundError,
    OrderValidationError,
    StaleOrderError,
)
from orders.filters import OrderFilter
from orders.models import Order
from orders.permissions import IsOrderParticipant, status_targets_for
from orders.serializers import OrderSerializer, PlaceOrderSerializer, UpdateStatusSerializer
from orders.services import OrderPlacementService, OrderStatusService, get_order
from orders.transitions import coerce_status

logger = logging.getLogger(__name__)


class OrderViewSet(ReadOnlyBaseViewSet):
    """
    Orders from the client, caterer and delivery sides.

    Endpoints:
    - GET /api/orders/ - The caller's own orders as a client (?status=, ?order_date__gte=)
    - POST /api/orders/ - Place an order for the caller
    - GET /api/orders/<id>/ - Order detail for a participant
    - PATCH /api/orders/<id>/status/ - Move the order to a new status
    - GET /api/orders/caterer/ - Orders containing the caller's meals
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    permission_classes = [IsAuthenticated, IsOrderParticipant]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == "list":
            queryset = queryset.filter(client_id=self.request.user.uid)
        return queryset.order_by("-order_date")

    def _get_order(self, request, pk):
        """Loads the order and checks the caller may act on it."""
        order = get_order(pk)
        self.check_object_permissions(request, order)
        return order

    def retrieve(self, request: Request, pk=None) -> Response:
        try:
            order = self._get_order(request, pk)
        except OrderNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(order).data)

    def create(self, request: Request) -> Response:
        serializer = PlaceOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            order_id = OrderPlacementService.place_order(
                client_id=request.user.uid,
                client_name=data["client_name"],
                delivery_address=data["delivery_address"],
                items=[dict(item) for item in data["items"]],
                total_price=data["total_price"],
            )
        except OrderValidationError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except OrderError as e:
            return Response({"error": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response({"order_id": str(order_id)}, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk=None) -> Response:
        """
        Body: {"status": ..., "delivery_person_id": optional, "expected_version": optional}

        Returns:
        - 200: The updated order
        - 400: Unknown status, illegal transition or unusable delivery person
        - 403: The caller's role on the order does not allow the requested status
        - 404: Order not found
        - 409: The order changed since ``expected_version`` was read
        """
        serializer = UpdateStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            order = self._get_order(request, pk)
            new_status = coerce_status(data["status"])
            if new_status not in status_targets_for(order, request.user.uid):
                return Response(
                    {"error": f"You cannot move order {order.id} to {new_status}."},
                    status=status.HTTP_403_FORBIDDEN,
                )
            order = OrderStatusService.update_status(
                order.id,
                new_status,
                delivery_person_id=data.get("delivery_person_id") or None,
                expected_version=data.get("expected_version"),
            )
        except OrderNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except StaleOrderError as e:
            return Response({"error": str(e)}, status=status.HTTP_409_CONFLICT)
        except (IllegalTransitionError, OrderValidationError, DeliveryPersonUnavailableError) as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except OrderError as e:
            return Response({"error": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        order = get_order(order.id)
        return Response(self.get_serializer(order).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path="caterer")
    def caterer(self, request: Request) -> Response:
        statuses = request.query_params.getlist("status") or None
        try:
            orders = OrderStatusService.get_orders_for_caterer(request.user.uid, statuses=statuses)
        except OrderValidationError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(self.get_serializer(orders, many=True).data)

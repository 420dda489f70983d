from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from directory.exceptions import DirectoryEntryNotFoundError
from directory.services import DirectoryService
from orders.exceptions import (
    DeliveryPersonUnavailableError,
    OrderError,
    OrderNotFoundError,
    OrderValidationError,
)
from orders.permissions import IsApprovedDeliveryPerson
from orders.serializers import DeliveryEarningsSerializer, OrderSerializer
from orders.services import ACTIVE_DELIVERY_STATUSES, DeliveryQueryService, OrderStatusService

logger = logging.getLogger(__name__)


class DeliveryOrderViewSet(viewsets.ViewSet):
    """
    Delivery-side order board for approved delivery people.

    Endpoints:
    - GET /api/delivery/orders/?region= - Unassigned orders ready in the region,
      plus the caller's active deliveries
    - POST /api/delivery/orders/<id>/claim/ - Bind the caller to an unassigned order
    """

    permission_classes = [IsAuthenticated, IsApprovedDeliveryPerson]

    def list(self, request: Request) -> Response:
        uid = request.user.uid
        region = request.query_params.get("region")
        if not region:
            try:
                region = DirectoryService.get_delivery_person(uid).region
            except DirectoryEntryNotFoundError as e:
                return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)

        available = DeliveryQueryService.list_deliverable_orders(region, unassigned_only=True)
        mine = DeliveryQueryService.list_mine(uid, ACTIVE_DELIVERY_STATUSES)

        return Response({
            "region": region,
            "available_orders": OrderSerializer(available, many=True).data,
            "my_deliveries": OrderSerializer(mine, many=True).data,
        })

    @action(detail=True, methods=["post"], url_path="claim")
    def claim(self, request: Request, pk=None) -> Response:
        """
        Returns:
        - 200: The order, now bound to the caller
        - 400: The order is not ready for delivery
        - 404: Order not found
        - 409: Another delivery person already holds the order
        """
        try:
            order = OrderStatusService.claim_for_delivery(pk, request.user.uid)
        except OrderNotFoundError as e:
            return Response({"error": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except OrderValidationError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DeliveryPersonUnavailableError as e:
            return Response({"error": str(e)}, status=status.HTTP_409_CONFLICT)
        except OrderError as e:
            return Response({"error": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)

        return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)


class DeliveryHistoryView(APIView):
    """
    GET /api/delivery/history/ - The caller's delivered orders and earnings.
    """

    permission_classes = [IsAuthenticated, IsApprovedDeliveryPerson]

    def get(self, request: Request) -> Response:
        summary = DeliveryQueryService.earnings_summary(request.user.uid)
        return Response(DeliveryEarningsSerializer(summary).data)

"""Order API routes."""

from fastapi import APIRouter, status

from src.api.deps import OrderServiceDep
from src.schemas.common import ErrorResponse
from src.schemas.order import (
    OrderCreateRequest,
    OrderMutationResponse,
    OrderResponse,
    OrderStatusUpdate,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "",
    response_model=OrderMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Missing fields or invalid item"}},
    summary="Create order",
    description="Validates a submitted order, computes its total server-side and stores it as Pending.",
)
async def create_order(data: OrderCreateRequest, service: OrderServiceDep) -> OrderMutationResponse:
    """Create a new order.

    Any total sent by the client is ignored.

    Args:
        data: Order submission.
        service: Order service.

    Returns:
        OrderMutationResponse: The stored order.
    """
    order = await service.create_order(data)
    return OrderMutationResponse(
        message="Order saved successfully",
        order=OrderResponse.model_validate(order),
    )


@router.get(
    "",
    response_model=list[OrderResponse],
    summary="List orders",
    description="Returns every order, most recently created first.",
)
async def list_orders(service: OrderServiceDep) -> list[OrderResponse]:
    """List all orders, newest first."""
    orders = await service.list_orders()
    return [OrderResponse.model_validate(order) for order in orders]


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse, "description": "Order not found"}},
    summary="Get order by ID",
)
async def get_order(order_id: str, service: OrderServiceDep) -> OrderResponse:
    """Get a single order by ID.

    Raises:
        NotFoundError: 404 if order not found.
    """
    order = await service.get_order(order_id)
    return OrderResponse.model_validate(order)


@router.patch(
    "/{order_id}/status",
    response_model=OrderMutationResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid status"},
        404: {"model": ErrorResponse, "description": "Order not found"},
    },
    summary="Update order status",
    description="Sets the status to Pending, Confirmed, Shipped or Delivered, in any order.",
)
async def update_order_status(
    order_id: str,
    data: OrderStatusUpdate,
    service: OrderServiceDep,
) -> OrderMutationResponse:
    """Update an order's status.

    Raises:
        InvalidStatusError: 400 if the status is not in the fixed set.
        NotFoundError: 404 if order not found.
    """
    order = await service.update_status(order_id, data.status)
    return OrderMutationResponse(
        message="Order status updated",
        order=OrderResponse.model_validate(order),
    )

"""Order model type definitions for database operations."""

from typing import Literal, TypedDict, get_args


# Fixed set of order statuses. Any value may follow any other.
OrderStatus = Literal["Pending", "Confirmed", "Shipped", "Delivered"]

ORDER_STATUSES: tuple[str, ...] = get_args(OrderStatus)

DEFAULT_ORDER_STATUS: OrderStatus = "Pending"
DEFAULT_PAYMENT_METHOD = "cod"


class OrderLineItem(TypedDict):
    """Structure for a single line item in an order.

    Stored as part of the items JSONB array; has no identity of its own.
    """

    name: str
    quantity: int
    price: float
    image: str | None


class Order(TypedDict):
    """Order table row representation.

    Maps directly to the orders table schema.
    """

    id: str
    name: str
    email: str | None
    address: str | None
    payment: str
    items: list[OrderLineItem]
    total: float
    status: OrderStatus
    created_at: str
    updated_at: str


class OrderUpdate(TypedDict, total=False):
    """Fields that may change after creation."""

    status: OrderStatus
    updated_at: str

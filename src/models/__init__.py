"""Database model type definitions."""

from src.models.order import (
    ORDER_STATUSES,
    Order,
    OrderLineItem,
    OrderStatus,
    OrderUpdate,
)

__all__ = [
    "ORDER_STATUSES",
    "Order",
    "OrderLineItem",
    "OrderStatus",
    "OrderUpdate",
]

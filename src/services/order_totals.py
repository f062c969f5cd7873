"""Server-side order total computation."""

from collections.abc import Iterable

from src.models.order import OrderLineItem


def calculate_order_total(items: Iterable[OrderLineItem]) -> float:
    """Sum price times quantity over the line items.

    Plain float arithmetic; no currency rounding is applied.
    """
    return sum((item["price"] * item["quantity"] for item in items), 0.0)

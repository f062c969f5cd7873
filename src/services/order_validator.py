"""Validation of submitted order payloads.

These functions are independent of the order store: they take the parsed
request models and either return a normalized draft or raise a domain
error that the error middleware turns into a 400 response.
"""

from dataclasses import dataclass, field

from src.api.middleware.error_handler import (
    InvalidStatusError,
    RejectionReason,
    ValidationError,
)
from src.models.order import (
    DEFAULT_PAYMENT_METHOD,
    ORDER_STATUSES,
    OrderLineItem,
    OrderStatus,
)
from src.schemas.order import OrderCreateRequest, OrderItemInput

MISSING_FIELDS_MESSAGE = "Name and items are required"
INVALID_ITEM_MESSAGE = "Item price must be >= 0 and quantity >= 1"


@dataclass
class OrderDraft:
    """A validated, normalized order submission that has not been stored yet."""

    name: str
    email: str | None = None
    address: str | None = None
    payment: str = DEFAULT_PAYMENT_METHOD
    items: list[OrderLineItem] = field(default_factory=list)


def _clean(value: str | None) -> str | None:
    """Trim an optional string, mapping blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _validate_item(item: OrderItemInput) -> OrderLineItem:
    if not item.name or not item.name.strip():
        raise ValidationError(INVALID_ITEM_MESSAGE, reason=RejectionReason.INVALID_ITEM)
    if item.price is None or item.price < 0 or item.quantity < 1:
        raise ValidationError(INVALID_ITEM_MESSAGE, reason=RejectionReason.INVALID_ITEM)

    return OrderLineItem(
        name=item.name,
        quantity=item.quantity,
        price=item.price,
        image=_clean(item.image),
    )


def validate_order_payload(payload: OrderCreateRequest) -> OrderDraft:
    """Check a submitted order and normalize it into a draft.

    Args:
        payload: Parsed order submission.

    Returns:
        OrderDraft: Trimmed customer fields, defaulted payment method and
            validated line items in submission order.

    Raises:
        ValidationError: MISSING_FIELDS if the name or items are missing,
            INVALID_ITEM if any item has a negative price, a quantity
            below one, or no name.
    """
    name = _clean(payload.name)
    if not name or not payload.items:
        raise ValidationError(MISSING_FIELDS_MESSAGE, reason=RejectionReason.MISSING_FIELDS)

    items = [_validate_item(item) for item in payload.items]

    return OrderDraft(
        name=name,
        email=_clean(payload.email),
        address=_clean(payload.address),
        payment=_clean(payload.payment) or DEFAULT_PAYMENT_METHOD,
        items=items,
    )


def validate_status(value: str | None) -> OrderStatus:
    """Check that a requested status belongs to the fixed status set.

    Raises:
        InvalidStatusError: If the value is missing or not one of
            Pending, Confirmed, Shipped, Delivered.
    """
    if value not in ORDER_STATUSES:
        raise InvalidStatusError()
    return value  # type: ignore[return-value]

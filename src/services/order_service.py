"""Order lifecycle business logic service."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.api.middleware.error_handler import NotFoundError
from src.core.supabase import get_supabase_client
from src.models.order import DEFAULT_ORDER_STATUS, Order, OrderUpdate
from src.schemas.order import OrderCreateRequest
from src.services.order_store import OrderStore, SupabaseOrderStore
from src.services.order_totals import calculate_order_total
from src.services.order_validator import validate_order_payload, validate_status

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND_MESSAGE = "Order not found"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _canonical_order_id(value: str) -> str | None:
    """Return the lowercase hyphenated form of a UUID, or None if it is not one."""
    try:
        return str(UUID(value))
    except (TypeError, ValueError):
        return None


class OrderService:
    """Service for creating, reading and updating orders.

    Holds no state between calls; everything lives in the order store.
    """

    def __init__(
        self,
        store: OrderStore | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize order service.

        Args:
            store: Optional order store for testing, defaults to Supabase.
            clock: Optional timestamp source for testing.
        """
        self._store = store
        self._clock = clock or _utcnow

    @property
    def store(self) -> OrderStore:
        """Get the order store."""
        if self._store is None:
            self._store = SupabaseOrderStore(get_supabase_client())
        return self._store

    async def create_order(self, payload: OrderCreateRequest) -> Order:
        """Validate a submission, compute its total and store it.

        Nothing is written when validation fails.

        Args:
            payload: Order submission as received from the client.

        Returns:
            Order: The stored order, status Pending.

        Raises:
            ValidationError: If required fields are missing or an item is invalid.
            StoreError: If the order could not be saved.
        """
        draft = validate_order_payload(payload)
        now = self._clock().isoformat()

        order = Order(
            id=str(uuid4()),
            name=draft.name,
            email=draft.email,
            address=draft.address,
            payment=draft.payment,
            items=draft.items,
            total=calculate_order_total(draft.items),
            status=DEFAULT_ORDER_STATUS,
            created_at=now,
            updated_at=now,
        )

        created = await self.store.create(order)
        logger.info("Order %s created with %d item(s), total %s", created["id"], len(draft.items), created["total"])
        return created

    async def get_order(self, order_id: str) -> Order:
        """Get an order by ID.

        Raises:
            NotFoundError: If no order has this ID.
        """
        canonical_id = _canonical_order_id(order_id)
        if canonical_id is None:
            raise NotFoundError(ORDER_NOT_FOUND_MESSAGE)

        order = await self.store.find_one(canonical_id)
        if order is None:
            raise NotFoundError(ORDER_NOT_FOUND_MESSAGE)
        return order

    async def list_orders(self) -> list[Order]:
        """Get all orders, newest first."""
        return await self.store.find_all()

    async def update_status(self, order_id: str, status: str | None) -> Order:
        """Set an order's status.

        Any status in the fixed set is accepted regardless of the current
        one; there is no transition ordering.

        Args:
            order_id: The order's ID.
            status: Requested status.

        Returns:
            Order: The updated order.

        Raises:
            InvalidStatusError: If the status is outside the fixed set. The
                store is not touched in that case.
            NotFoundError: If no order has this ID.
        """
        new_status = validate_status(status)
        canonical_id = _canonical_order_id(order_id)
        if canonical_id is None:
            raise NotFoundError(ORDER_NOT_FOUND_MESSAGE)

        changes = OrderUpdate(status=new_status, updated_at=self._clock().isoformat())
        order = await self.store.update_one(canonical_id, changes)
        if order is None:
            raise NotFoundError(ORDER_NOT_FOUND_MESSAGE)

        logger.info("Order %s status set to %s", canonical_id, new_status)
        return order

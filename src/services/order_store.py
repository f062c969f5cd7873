"""Persistence of order records in Supabase."""

import logging
from typing import Protocol

import httpx
from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client

from src.api.middleware.error_handler import StoreError
from src.core.config import get_settings
from src.models.order import Order, OrderUpdate

logger = logging.getLogger(__name__)

# Failures raised by the Supabase client for an unreachable or rejecting backend
STORE_FAILURES = (PostgrestAPIError, httpx.HTTPError)


class OrderStore(Protocol):
    """Narrow storage interface the order service depends on."""

    async def create(self, order: Order) -> Order: ...

    async def find_one(self, order_id: str) -> Order | None: ...

    async def find_all(self) -> list[Order]: ...

    async def update_one(self, order_id: str, changes: OrderUpdate) -> Order | None: ...


class SupabaseOrderStore:
    """Order store backed by a Supabase (PostgREST) table.

    Every call is a single request against the table; client failures are
    re-raised as StoreError with the client exception chained.
    """

    def __init__(self, supabase_client: Client, table_name: str | None = None) -> None:
        """Initialize the store.

        Args:
            supabase_client: Supabase client to issue queries with.
            table_name: Orders table name, defaults to the configured one.
        """
        self.client = supabase_client
        self.table_name = table_name or get_settings().orders_table

    def _table(self):
        return self.client.table(self.table_name)

    async def create(self, order: Order) -> Order:
        """Insert a new order row.

        Returns:
            Order: The row as stored.
        """
        try:
            response = self._table().insert(dict(order)).execute()
        except STORE_FAILURES as e:
            raise StoreError("Failed to save order") from e

        if not response.data:
            raise StoreError("Failed to save order")
        return response.data[0]

    async def find_one(self, order_id: str) -> Order | None:
        """Get an order by ID.

        Returns:
            Order | None: The order or None if not found.
        """
        try:
            response = (
                self._table()
                .select("*")
                .eq("id", order_id)
                .maybe_single()
                .execute()
            )
        except STORE_FAILURES as e:
            # Older postgrest releases signal "no row" from maybe_single as a 204 error
            if isinstance(e, PostgrestAPIError) and str(e.code) == "204":
                return None
            raise StoreError("Failed to load order") from e

        return response.data if response and response.data else None

    async def find_all(self) -> list[Order]:
        """Get every order, most recently created first."""
        try:
            response = (
                self._table()
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except STORE_FAILURES as e:
            raise StoreError("Failed to load orders") from e

        return response.data or []

    async def update_one(self, order_id: str, changes: OrderUpdate) -> Order | None:
        """Apply changes to a single order.

        Returns:
            Order | None: The updated row, or None if no order has this ID.
        """
        try:
            response = (
                self._table()
                .update(dict(changes))
                .eq("id", order_id)
                .execute()
            )
        except STORE_FAILURES as e:
            raise StoreError("Failed to update order") from e

        if not response.data:
            return None
        return response.data[0]

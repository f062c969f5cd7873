"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends

from src.core.supabase import get_supabase_client
from src.services.order_service import OrderService
from src.services.order_store import OrderStore, SupabaseOrderStore


def get_order_store() -> OrderStore:
    """Provide the order store backed by the process-wide Supabase client.

    Override this dependency in tests to run against another store.
    """
    return SupabaseOrderStore(get_supabase_client())


def get_order_service(
    store: Annotated[OrderStore, Depends(get_order_store)],
) -> OrderService:
    """Provide an order service bound to the request's order store."""
    return OrderService(store=store)


# Type alias for cleaner dependency injection
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]

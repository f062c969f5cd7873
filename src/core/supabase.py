"""Supabase client lifecycle for the order store."""

import logging
from typing import Any

from supabase import Client, create_client

from src.core.config import get_settings

logger = logging.getLogger(__name__)

# Process-wide client, created by init_supabase_client() during app startup
_supabase_client: Client | None = None


def init_supabase_client(verify: bool = True) -> Client:
    """Create the process-wide Supabase client.

    Uses the secret key for backend operations, which bypasses RLS
    at the PostgREST level.

    Args:
        verify: Query the orders table once and raise if it is unreachable.

    Returns:
        Client: Supabase client instance.

    Raises:
        Exception: Whatever the Supabase client raised while verifying the connection.
    """
    global _supabase_client
    settings = get_settings()
    client = create_client(
        settings.supabase_url,
        settings.supabase_secret_key,
    )
    if verify:
        client.table(settings.orders_table).select("id").limit(1).execute()
    _supabase_client = client
    logger.info("Supabase client initialized for table '%s'", settings.orders_table)
    return client


def shutdown_supabase_client() -> None:
    """Release the process-wide Supabase client."""
    global _supabase_client
    _supabase_client = None
    logger.info("Supabase client released")


def get_supabase_client() -> Client:
    """Get the process-wide Supabase client, creating it lazily if needed.

    Lazy creation skips the startup verification; it covers scripts and
    tests that run without the application lifespan.

    Returns:
        Client: Supabase client instance.
    """
    if _supabase_client is None:
        return init_supabase_client(verify=False)
    return _supabase_client


async def check_database_connection() -> dict[str, Any]:
    """Check if database connection is healthy.

    Performs a simple query against the orders table to verify connectivity.

    Returns:
        dict: Connection status with 'healthy' boolean and optional 'error' message.
    """
    try:
        client = get_supabase_client()
        client.table(get_settings().orders_table).select("id").limit(1).execute()
        return {"healthy": True}
    except Exception as e:
        return {"healthy": False, "error": str(e)}

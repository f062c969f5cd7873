"""Pytest configuration and fixtures."""

import copy
import os
from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test.secret.key")
os.environ.setdefault("VERIFY_DATABASE_ON_STARTUP", "false")


class InMemoryOrderStore:
    """Order store test double keeping rows in a dict.

    Rows are copied on the way in and out so callers cannot mutate
    stored state by accident.
    """

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []

    async def create(self, order: dict[str, Any]) -> dict[str, Any]:
        self.calls.append("create")
        self.rows[order["id"]] = copy.deepcopy(dict(order))
        return copy.deepcopy(self.rows[order["id"]])

    async def find_one(self, order_id: str) -> dict[str, Any] | None:
        self.calls.append("find_one")
        row = self.rows.get(order_id)
        return copy.deepcopy(row) if row else None

    async def find_all(self) -> list[dict[str, Any]]:
        self.calls.append("find_all")
        rows = sorted(self.rows.values(), key=lambda r: r["created_at"], reverse=True)
        return copy.deepcopy(rows)

    async def update_one(self, order_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        self.calls.append("update_one")
        row = self.rows.get(order_id)
        if row is None:
            return None
        row.update(changes)
        return copy.deepcopy(row)


@pytest.fixture
def order_store() -> InMemoryOrderStore:
    """Provide an empty in-memory order store."""
    return InMemoryOrderStore()


@pytest.fixture
def fake_clock() -> Callable[[], datetime]:
    """Provide a clock that advances one second on every call."""
    current = [datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)]

    def tick() -> datetime:
        current[0] += timedelta(seconds=1)
        return current[0]

    return tick


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture
def mock_supabase_client() -> Generator[MagicMock, None, None]:
    """Provide a mocked Supabase client used during app startup.

    Yields:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.data = []
    mock_client.table.return_value.select.return_value.limit.return_value.execute.return_value = (
        mock_response
    )

    with patch("src.main.init_supabase_client", return_value=mock_client), \
         patch("src.core.supabase.get_supabase_client", return_value=mock_client):
        yield mock_client


@pytest.fixture
def client(
    mock_supabase_client: MagicMock,
    order_store: InMemoryOrderStore,
) -> Generator[TestClient, None, None]:
    """Provide a test client whose routes use the in-memory order store.

    Args:
        mock_supabase_client: Mocked Supabase client fixture.
        order_store: In-memory order store fixture.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.api.deps import get_order_store
    from src.main import app

    app.dependency_overrides[get_order_store] = lambda: order_store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Create a sample order submission."""
    return {
        "name": "  Asha Verma  ",
        "email": " asha@example.com ",
        "address": "12 MG Road, Pune",
        "items": [
            {"name": "Pen", "quantity": 3, "price": 2.0},
            {"name": "Book", "quantity": 1, "price": 15.0, "image": "book.jpg"},
        ],
    }

"""Server-rendered HTML pages."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from src.api.deps import OrderServiceDep
from src.core.config import get_settings
from src.services.order_table_renderer import render_home_page, render_orders_table

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, summary="Landing page")
async def home() -> HTMLResponse:
    """Return a landing page linking to the order views."""
    return HTMLResponse(render_home_page())


@router.get(
    "/orders-table",
    response_class=HTMLResponse,
    summary="Orders table",
    description="Read-only HTML table of every order, newest first.",
)
async def orders_table(service: OrderServiceDep) -> HTMLResponse:
    """Render all orders as an HTML table.

    Uses the same read path as the JSON listing.
    """
    settings = get_settings()
    orders = await service.list_orders()
    return HTMLResponse(
        render_orders_table(
            orders,
            currency_symbol=settings.currency_symbol,
            uploads_url_prefix=settings.uploads_url_prefix,
        )
    )

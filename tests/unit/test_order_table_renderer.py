"""Unit tests for the orders table renderer."""

from src.services.order_table_renderer import (
    render_home_page,
    render_orders_table,
    resolve_image_url,
)


def _order(**overrides) -> dict:
    order = {
        "id": "660e8400-e29b-41d4-a716-446655440000",
        "name": "Asha",
        "email": None,
        "address": "Pune",
        "payment": "cod",
        "items": [
            {"name": "Pen", "quantity": 3, "price": 2.0, "image": "pen.jpg"},
            {"name": "Book", "quantity": 1, "price": 15.5, "image": None},
        ],
        "total": 21.5,
        "status": "Pending",
        "created_at": "2026-01-01T12:30:00+00:00",
        "updated_at": "2026-01-01T12:30:00+00:00",
    }
    order.update(overrides)
    return order


class TestResolveImageUrl:
    """Tests for resolve_image_url."""

    def test_absolute_url_is_kept(self) -> None:
        """Test that http(s) URLs are used directly."""
        assert resolve_image_url("https://cdn.example.com/a.png") == "https://cdn.example.com/a.png"

    def test_filename_is_served_from_uploads(self) -> None:
        """Test that bare filenames resolve under the uploads prefix."""
        assert resolve_image_url("a.png") == "/uploads/a.png"
        assert resolve_image_url("a.png", "/static/") == "/static/a.png"


class TestRenderOrdersTable:
    """Tests for render_orders_table."""

    def test_renders_header_and_row(self) -> None:
        """Test that each column is present."""
        html = render_orders_table([_order()])

        for header in ("Name", "Email", "Address", "Payment", "Status", "Total", "Items", "Created"):
            assert f"<th>{header}</th>" in html
        assert "<td>Asha</td>" in html
        assert "<td>Pending</td>" in html

    def test_missing_values_render_as_dash(self) -> None:
        """Test the placeholder for an absent email."""
        html = render_orders_table([_order()])

        assert "<td>-</td>" in html

    def test_total_has_two_decimals(self) -> None:
        """Test total formatting with the currency symbol."""
        html = render_orders_table([_order(total=21)], currency_symbol="$")

        assert "$21.00" in html

    def test_large_item_price_is_not_abbreviated(self) -> None:
        """Test that item prices keep every digit."""
        order = _order(items=[{"name": "TV", "quantity": 1, "price": 1234567.0}], total=1234567.0)

        html = render_orders_table([order])

        assert "TV (x1) &ndash; ₹1234567.0</li>" in html
        assert "e+" not in html

    def test_items_and_images(self) -> None:
        """Test item lines and image sources."""
        html = render_orders_table([_order()])

        assert "Pen (x3)" in html
        assert "Book (x1)" in html
        assert 'src="/uploads/pen.jpg"' in html
        assert html.count("<img") == 1

    def test_escapes_stored_values(self) -> None:
        """Test that customer input cannot inject markup."""
        html = render_orders_table([_order(name="<script>alert(1)</script>")])

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_keeps_given_order(self) -> None:
        """Test that rows follow the input order."""
        html = render_orders_table([_order(name="Newer"), _order(name="Older")])

        assert html.index("Newer") < html.index("Older")

    def test_no_orders_renders_empty_table(self) -> None:
        """Test rendering with nothing stored."""
        html = render_orders_table([])

        assert "<table>" in html
        assert "<td>" not in html


def test_home_page_links_to_order_views() -> None:
    """Test the landing page links."""
    html = render_home_page()

    assert 'href="/api/orders"' in html
    assert 'href="/orders-table"' in html

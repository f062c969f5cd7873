"""HTML rendering of stored orders for the admin table view."""

from collections.abc import Iterable
from datetime import datetime
from html import escape

from src.models.order import Order, OrderLineItem


def _text(value: object | None, placeholder: str = "-") -> str:
    if value is None or value == "":
        return placeholder
    return escape(str(value))


def resolve_image_url(image: str, uploads_url_prefix: str = "/uploads") -> str:
    """Return the URL an item image is served from.

    Absolute http(s) URLs are used as-is; anything else is treated as a
    filename in the uploads directory.
    """
    if image.startswith(("http://", "https://")):
        return image
    return f"{uploads_url_prefix.rstrip('/')}/{image.lstrip('/')}"


def _format_created(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%d/%m/%Y, %H:%M:%S")
    except (TypeError, ValueError):
        return _text(value)


def _render_item(item: OrderLineItem, currency_symbol: str, uploads_url_prefix: str) -> str:
    image_html = ""
    if item.get("image"):
        image_html = f'<img src="{escape(resolve_image_url(item["image"], uploads_url_prefix))}" alt="">'
    return (
        f"<li>{image_html} {escape(item['name'])} (x{item['quantity']}) "
        f"&ndash; {escape(currency_symbol)}{item['price']}</li>"
    )


def _render_row(order: Order, currency_symbol: str, uploads_url_prefix: str) -> str:
    items_html = "".join(
        _render_item(item, currency_symbol, uploads_url_prefix) for item in order["items"]
    )
    return f"""
      <tr>
        <td>{_text(order["name"])}</td>
        <td>{_text(order.get("email"))}</td>
        <td>{_text(order.get("address"))}</td>
        <td>{_text(order["payment"])}</td>
        <td>{_text(order["status"])}</td>
        <td>{escape(currency_symbol)}{float(order["total"]):.2f}</td>
        <td><ul>{items_html}</ul></td>
        <td>{_format_created(order["created_at"])}</td>
      </tr>"""


def render_orders_table(
    orders: Iterable[Order],
    currency_symbol: str = "₹",
    uploads_url_prefix: str = "/uploads",
) -> str:
    """Render orders as a standalone HTML page with one table row per order.

    Orders are rendered in the order given; every stored value is escaped.

    Args:
        orders: Orders to render, typically newest first.
        currency_symbol: Symbol prefixed to totals and item prices.
        uploads_url_prefix: URL prefix for item images stored as filenames.

    Returns:
        str: Complete HTML document.
    """
    rows = "".join(_render_row(order, currency_symbol, uploads_url_prefix) for order in orders)

    return f"""
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Orders Table</title>
    <style>
        body {{ font-family: Arial, sans-serif; background: #f4f4f4; padding: 20px; }}
        table {{ width: 100%; border-collapse: collapse; background: #fff; }}
        th, td {{ border: 1px solid #ccc; padding: 10px; vertical-align: top; }}
        th {{ background: #eee; }}
        img {{ width: 60px; height: 60px; object-fit: cover; border-radius: 6px; }}
        ul {{ padding-left: 18px; margin: 0; }}
    </style>
</head>
<body>
    <h2>Orders Table</h2>
    <table>
      <tr>
        <th>Name</th>
        <th>Email</th>
        <th>Address</th>
        <th>Payment</th>
        <th>Status</th>
        <th>Total</th>
        <th>Items</th>
        <th>Created</th>
      </tr>{rows}
    </table>
</body>
</html>
"""


def render_home_page() -> str:
    """Render the landing page linking to the order views."""
    return """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Order Backend</title>
</head>
<body style="font-family: Arial, sans-serif;">
    <p>Server is running</p>
    <ul>
        <li><a href="/api/orders">View Orders JSON</a></li>
        <li><a href="/orders-table">View Orders Table</a></li>
    </ul>
</body>
</html>
"""

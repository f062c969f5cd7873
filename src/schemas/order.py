"""Order Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.models.order import OrderStatus


class OrderItemInput(BaseModel):
    """A line item as submitted by the client.

    Fields are optional here so that missing values reach the order
    validator and are reported as domain errors rather than parse errors.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, description="Product name")
    quantity: int = Field(default=1, description="Quantity ordered")
    price: float | None = Field(default=None, description="Unit price")
    image: str | None = Field(default=None, description="Absolute image URL or uploaded filename")


class OrderCreateRequest(BaseModel):
    """Schema for submitting an order via POST /api/orders.

    Any client-supplied ``total`` is dropped; totals are computed server-side.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, description="Customer name")
    email: str | None = Field(default=None, description="Customer email")
    address: str | None = Field(default=None, description="Delivery address")
    payment: str | None = Field(default=None, description="Payment method, defaults to cod")
    items: list[OrderItemInput] | None = Field(default=None, description="Ordered line items")


class OrderStatusUpdate(BaseModel):
    """Schema for PATCH /api/orders/{order_id}/status."""

    model_config = ConfigDict(extra="ignore")

    status: str | None = Field(default=None, description="New order status")


class LineItemResponse(BaseModel):
    """Schema for a single line item in an order response."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(description="Product name")
    quantity: int = Field(ge=1, description="Quantity ordered")
    price: float = Field(ge=0, description="Unit price")
    image: str | None = Field(default=None, description="Image URL or uploaded filename")


class OrderResponse(BaseModel):
    """Schema for order API responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(description="Order unique identifier")
    name: str = Field(description="Customer name")
    email: str | None = Field(default=None, description="Customer email")
    address: str | None = Field(default=None, description="Delivery address")
    payment: str = Field(description="Payment method")
    items: list[LineItemResponse] = Field(description="Order line items")
    total: float = Field(ge=0, description="Server-computed order total")
    status: OrderStatus = Field(description="Order status")
    created_at: datetime = Field(serialization_alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(serialization_alias="updatedAt", description="Last update timestamp")


class OrderMutationResponse(BaseModel):
    """Envelope returned after creating an order or changing its status."""

    success: Literal[True] = Field(default=True, description="Always true for successful mutations")
    message: str = Field(description="Human-readable outcome")
    order: OrderResponse = Field(description="The stored order")

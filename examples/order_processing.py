"""Example: an order with nested items, an address, and a total refinement."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field

from maybe_pydantic import Schema, maybe


class OrderItem(BaseModel):
    product_id: UUID
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., gt=0)


class Address(BaseModel):
    street: str = Field(..., min_length=5)
    city: str = Field(..., min_length=3)
    zip: Annotated[str, Field(pattern=r"^\d{5}$")]


class Order(BaseModel):
    items: list[OrderItem] = Field(..., min_length=1)
    total: float = Field(..., gt=0)
    shipping_address: Address


def total_matches(order: Order) -> bool:
    expected = sum(item.quantity * item.unit_price for item in order.items)
    return abs(order.total - expected) < 0.01


order_schema = Schema(Order).refine(
    total_matches, "Total does not match the items", path=("total",)
)
process_order = maybe(
    lambda order: f"{len(order.items)} item(s) accepted", order_schema
)

invalid_order = {
    "items": [],
    "total": 0,
    "shipping_address": {"street": "123", "city": "NY", "zip": "ABCDE"},
}

mismatched_order = {
    "items": [
        {
            "product_id": "123e4567-e89b-12d3-a456-426614174000",
            "quantity": 2,
            "unit_price": 9.5,
        }
    ],
    "total": 25,
    "shipping_address": {"street": "1 Main Street", "city": "Paris", "zip": "75001"},
}

if __name__ == "__main__":
    error, _ = process_order(invalid_order)
    print("Order Processing Errors:", error)

    error, _ = process_order(mismatched_order)
    print("\nOrder Total Errors:", error)

    error, summary = process_order({**mismatched_order, "total": 19})
    print("\nValid order:", error, summary)

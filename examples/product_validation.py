"""Example: rejecting an invalid product."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from maybe_pydantic import maybe


class Product(BaseModel):
    name: str = Field(..., min_length=5)
    price: float = Field(..., gt=0)
    category: Literal["electronics", "clothing", "books"]
    stock: int = Field(..., ge=0)


invalid_product = {
    "name": "Phone",
    "price": -299.99,
    "category": "unknown",
    "stock": -5,
}

if __name__ == "__main__":
    error, _ = maybe(lambda p: p.name, Product)(invalid_product)
    print("Product Validation Errors:", error)

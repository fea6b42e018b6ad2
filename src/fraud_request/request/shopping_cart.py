"""A single line of the shopping cart."""

from __future__ import annotations

from .base import Amount, RequestModel


class ShoppingCartItem(RequestModel):
    category: str | None = None
    item_id: str | None = None
    quantity: int | None = None
    price: Amount | None = None  # Per-unit price

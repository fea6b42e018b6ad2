"""Order data for the scoring request."""

from __future__ import annotations

from .base import Amount, RequestModel


class Order(RequestModel):
    amount: Amount | None = None
    currency: str | None = None  # ISO 4217, e.g. "USD"
    discount_code: str | None = None
    affiliate_id: str | None = None
    subaffiliate_id: str | None = None
    referrer_uri: str | None = None
    is_gift: bool | None = None
    has_gift_message: bool | None = None

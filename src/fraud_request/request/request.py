"""The scoring request aggregate.

Composes the optional sub-objects and the ordered shopping cart into one
immutable object and renders the canonical JSON document::

    request = (
        Request.builder()
        .device(Device(ip_address="1.1.1.1"))
        .email(Email.builder().address("test@test.org").build())
        .add_shopping_cart_item(ShoppingCartItem(item_id="sku-1", quantity=1))
        .build()
    )
    payload = request.to_json()
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field
from pydantic_core import PydanticSerializationError

from fraud_request.core.errors import SerializationError
from fraud_request.observability.logger import get_logger

from .account import Account
from .base import RequestModel, prune_empty
from .credit_card import CreditCard
from .device import Device
from .email import Email
from .event import Event
from .location import Billing, Shipping
from .order import Order
from .payment import Payment
from .shopping_cart import ShoppingCartItem

logger = get_logger(__name__)


class Request(RequestModel):
    """Everything sent to the scoring service for one transaction."""

    account: Account | None = None
    billing: Billing | None = None
    credit_card: CreditCard | None = None
    device: Device | None = None
    email: Email | None = None
    event: Event | None = None
    order: Order | None = None
    payment: Payment | None = None
    shipping: Shipping | None = None
    shopping_cart: tuple[ShoppingCartItem, ...] = Field(default_factory=tuple)

    @classmethod
    def builder(cls) -> RequestBuilder:
        return RequestBuilder()

    def to_dict(self) -> dict[str, Any]:
        try:
            return super().to_dict()
        except PydanticSerializationError as exc:
            raise SerializationError(f"Cannot serialize request: {exc}") from exc

    def to_json(self) -> str:
        """Canonical JSON: wire names, lowercase enums, no null or empty values."""
        payload = self.to_dict()
        try:
            encoded = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
            encoded.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot encode request as JSON: {exc}") from exc
        logger.debug("request.serialized", keys=sorted(payload))
        return encoded


class RequestBuilder:
    """Collects sub-objects for a ``Request``.

    Sub-objects are frozen, so holding references to them never aliases
    mutable state.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._shopping_cart: list[ShoppingCartItem] = []

    def account(self, account: Account) -> RequestBuilder:
        self._values["account"] = account
        return self

    def billing(self, billing: Billing) -> RequestBuilder:
        self._values["billing"] = billing
        return self

    def credit_card(self, credit_card: CreditCard) -> RequestBuilder:
        self._values["credit_card"] = credit_card
        return self

    def device(self, device: Device) -> RequestBuilder:
        self._values["device"] = device
        return self

    def email(self, email: Email) -> RequestBuilder:
        self._values["email"] = email
        return self

    def event(self, event: Event) -> RequestBuilder:
        self._values["event"] = event
        return self

    def order(self, order: Order) -> RequestBuilder:
        self._values["order"] = order
        return self

    def payment(self, payment: Payment) -> RequestBuilder:
        self._values["payment"] = payment
        return self

    def shipping(self, shipping: Shipping) -> RequestBuilder:
        self._values["shipping"] = shipping
        return self

    def add_shopping_cart_item(self, item: ShoppingCartItem) -> RequestBuilder:
        """Append *item*; cart order is preserved in the output."""
        self._shopping_cart.append(item)
        return self

    def build(self) -> Request:
        return Request(**self._values, shopping_cart=tuple(self._shopping_cart))

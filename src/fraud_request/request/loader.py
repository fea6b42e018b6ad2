"""Build a ``Request`` from a plain mapping (parsed JSON or TOML input).

Each section goes through its builder, so email input is validated and
hashed exactly as it would be in code.  Email options default to the
``[email]`` settings.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fraud_request.core.config import Settings
from fraud_request.core.errors import InvalidInputError
from fraud_request.observability.logger import get_logger

from .account import Account
from .base import ModelBuilder
from .credit_card import CreditCard
from .device import Device
from .email import Email
from .event import Event
from .location import Billing, Shipping
from .order import Order
from .payment import Payment
from .request import Request, RequestBuilder
from .shopping_cart import ShoppingCartItem

logger = get_logger(__name__)

_PLAIN_SECTIONS = {
    "billing": Billing,
    "credit_card": CreditCard,
    "device": Device,
    "order": Order,
    "payment": Payment,
    "shipping": Shipping,
}


def request_from_mapping(
    data: dict[str, Any],
    settings: Settings | None = None,
) -> Request:
    """Build a request from *data*, keyed by wire section name.

    Raises:
        InvalidInputError: on an unknown section or a rejected value.
    """
    settings = settings or Settings()
    known = {"account", "email", "event", "shopping_cart", *_PLAIN_SECTIONS}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidInputError("section", unknown[0], "unknown request section")

    builder = Request.builder()

    if "account" in data:
        builder.account(_account(_section("account", data["account"])))
    if "email" in data:
        builder.email(_email(_section("email", data["email"]), settings))
    if "event" in data:
        builder.event(_event(_section("event", data["event"])))
    for section, model in _PLAIN_SECTIONS.items():
        if section in data:
            fields = _section(section, data[section])
            _attach(builder, section, _fill(model.builder(), fields).build())
    cart = data.get("shopping_cart", [])
    if not isinstance(cart, list):
        raise InvalidInputError("shopping_cart", cart, "expected a list of items")
    for item in cart:
        fields = _section("shopping_cart", item)
        builder.add_shopping_cart_item(_fill(ShoppingCartItem.builder(), fields).build())

    request = builder.build()
    logger.debug("loader.request_built", sections=sorted(data))
    return request


def _section(name: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidInputError(name, value, "expected an object")
    return value


def _attach(builder: RequestBuilder, section: str, value: Any) -> None:
    getattr(builder, section)(value)


def _fill(builder: ModelBuilder[Any], fields: dict[str, Any]) -> ModelBuilder[Any]:
    for name, value in fields.items():
        builder.set(name, value)
    return builder


def _account(fields: dict[str, Any]) -> Account:
    fields = dict(fields)
    builder = Account.builder()
    if "username" in fields:
        builder.username(_text("username", fields.pop("username")))
    return _fill(builder, fields).build()


def _email(fields: dict[str, Any], settings: Settings) -> Email:
    fields = dict(fields)
    validate = _flag(fields, "validate", settings.email.validate_input)
    hash_address = _flag(fields, "hash_address", settings.email.hash_address)
    unknown = sorted(set(fields) - {"address", "domain"})
    if unknown:
        raise InvalidInputError("field", unknown[0], "unknown email field")

    builder = Email.builder(validate=validate)
    if "domain" in fields:
        builder.domain(_text("domain", fields["domain"]))
    if "address" in fields:
        builder.address(_text("address", fields["address"]))
    if hash_address:
        builder.hash_address()
    return builder.build()


def _flag(fields: dict[str, Any], name: str, default: bool) -> bool:
    value = fields.pop(name, default)
    if not isinstance(value, bool):
        raise InvalidInputError(name, value, "expected true or false")
    return value


def _text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(name, value, "expected a string")
    return value


def _event(fields: dict[str, Any]) -> Event:
    fields = dict(fields)
    builder = Event.builder()
    if "time" in fields:
        raw = fields.pop("time")
        try:
            when = raw if isinstance(raw, datetime) else datetime.fromisoformat(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError("time", raw, "expected an ISO 8601 timestamp") from exc
        builder.time(when)
    return _fill(builder, fields).build()

"""Billing and shipping addresses.

Both share the same postal fields; shipping adds the delivery speed.
Country and region codes are passed through as given.
"""

from __future__ import annotations

from pydantic import Field

from fraud_request.core.enums import DeliverySpeed

from .base import RequestModel


class Location(RequestModel):
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    address: str | None = None
    address_2: str | None = None
    city: str | None = None
    region: str | None = None  # ISO 3166-2 subdivision code, e.g. "NY"
    country: str | None = None  # ISO 3166-1 alpha-2, e.g. "US"
    postal: str | None = None
    phone_number: str | None = None
    phone_country_code: str | None = Field(default=None, max_length=4)


class Billing(Location):
    """Billing address of the customer."""


class Shipping(Location):
    """Shipping address of the order."""

    delivery_speed: DeliverySpeed | None = None

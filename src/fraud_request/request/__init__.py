"""Request models: immutable sub-objects, their builders, the aggregate.

Public API
----------
Aggregate:
    Request, RequestBuilder, request_from_mapping

Sub-objects:
    Account, Billing, CreditCard, Device, Email, Event, Order, Payment,
    Shipping, ShoppingCartItem

Builders:
    ModelBuilder, AccountBuilder, EmailBuilder, EventBuilder
"""

from fraud_request.request.account import Account, AccountBuilder
from fraud_request.request.base import ModelBuilder, RequestModel
from fraud_request.request.credit_card import CreditCard
from fraud_request.request.device import Device
from fraud_request.request.email import DomainSource, Email, EmailBuilder
from fraud_request.request.event import (
    TIME_FORMAT,
    Event,
    EventBuilder,
    format_event_time,
    parse_event_time,
)
from fraud_request.request.loader import request_from_mapping
from fraud_request.request.location import Billing, Shipping
from fraud_request.request.order import Order
from fraud_request.request.payment import Payment
from fraud_request.request.request import Request, RequestBuilder
from fraud_request.request.shopping_cart import ShoppingCartItem

__all__ = [
    # Aggregate
    "Request",
    "RequestBuilder",
    "request_from_mapping",
    # Sub-objects
    "Account",
    "Billing",
    "CreditCard",
    "Device",
    "Email",
    "Event",
    "Order",
    "Payment",
    "Shipping",
    "ShoppingCartItem",
    # Builders
    "AccountBuilder",
    "DomainSource",
    "EmailBuilder",
    "EventBuilder",
    "ModelBuilder",
    "RequestModel",
    # Event time
    "TIME_FORMAT",
    "format_event_time",
    "parse_event_time",
]

"""Fraud-scoring request payloads: validated builders, frozen models, canonical JSON."""

from fraud_request.core.enums import DeliverySpeed, EventType, PaymentProcessor
from fraud_request.core.errors import (
    ConfigError,
    FraudRequestError,
    InvalidInputError,
    SerializationError,
    TimeParseError,
)
from fraud_request.request import (
    Account,
    Billing,
    CreditCard,
    Device,
    Email,
    Event,
    Order,
    Payment,
    Request,
    Shipping,
    ShoppingCartItem,
    request_from_mapping,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "Billing",
    "ConfigError",
    "CreditCard",
    "DeliverySpeed",
    "Device",
    "Email",
    "Event",
    "EventType",
    "FraudRequestError",
    "InvalidInputError",
    "Order",
    "Payment",
    "PaymentProcessor",
    "Request",
    "SerializationError",
    "Shipping",
    "ShoppingCartItem",
    "TimeParseError",
    "request_from_mapping",
]

"""Shared fixtures for the fraud-request test suite."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from fraud_request.core.enums import DeliverySpeed, EventType, PaymentProcessor
from fraud_request.request import (
    Account,
    Billing,
    CreditCard,
    Device,
    Email,
    Event,
    Order,
    Payment,
    Shipping,
    ShoppingCartItem,
)


# ---------------------------------------------------------------------------
# Sub-objects
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_time() -> datetime:
    """A UTC instant with a sub-hundredth fraction that must be truncated."""
    return datetime(2024, 3, 9, 14, 5, 7, 123_456, tzinfo=timezone.utc)


@pytest.fixture
def sample_account() -> Account:
    return Account.builder().user_id("3132").username("fred").build()


@pytest.fixture
def sample_email() -> Email:
    return Email.builder().address("test@test.org").build()


@pytest.fixture
def sample_event(sample_time) -> Event:
    return (
        Event.builder()
        .transaction_id("txn-1")
        .shop_id("shop-9")
        .time(sample_time)
        .type(EventType.PURCHASE)
        .build()
    )


@pytest.fixture
def sample_billing() -> Billing:
    return (
        Billing.builder()
        .first_name("Ada")
        .last_name("Lovelace")
        .address("1 Main St")
        .city("Springfield")
        .region("IL")
        .country("US")
        .postal("62701")
        .build()
    )


@pytest.fixture
def sample_shipping() -> Shipping:
    return (
        Shipping.builder()
        .first_name("Ada")
        .country("US")
        .delivery_speed(DeliverySpeed.EXPEDITED)
        .build()
    )


@pytest.fixture
def sample_credit_card() -> CreditCard:
    return (
        CreditCard.builder()
        .issuer_id_number("411111")
        .last_4_digits("1111")
        .avs_result("Y")
        .cvv_result("N")
        .build()
    )


@pytest.fixture
def sample_device() -> Device:
    return Device.builder().ip_address("81.2.69.160").user_agent("Mozilla/5.0").build()


@pytest.fixture
def sample_order() -> Order:
    return (
        Order.builder()
        .amount(Decimal("323.21"))
        .currency("USD")
        .is_gift(True)
        .build()
    )


@pytest.fixture
def sample_payment() -> Payment:
    return (
        Payment.builder()
        .processor(PaymentProcessor.STRIPE)
        .was_authorized(False)
        .build()
    )


@pytest.fixture
def cart_items() -> list[ShoppingCartItem]:
    return [
        ShoppingCartItem.builder().item_id("sku-1").quantity(2).price(Decimal("9.5")).build(),
        ShoppingCartItem.builder().item_id("sku-2").category("books").build(),
        ShoppingCartItem.builder().item_id("sku-3").quantity(1).build(),
    ]

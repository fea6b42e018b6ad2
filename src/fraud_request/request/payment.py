"""Payment data for the scoring request."""

from __future__ import annotations

from fraud_request.core.enums import PaymentProcessor

from .base import RequestModel


class Payment(RequestModel):
    processor: PaymentProcessor | None = None
    was_authorized: bool | None = None
    decline_code: str | None = None

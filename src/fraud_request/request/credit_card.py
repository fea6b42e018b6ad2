"""Credit card data for the scoring request."""

from __future__ import annotations

from pydantic import Field

from .base import RequestModel


class CreditCard(RequestModel):
    """Card details.  Never carries the full card number."""

    issuer_id_number: str | None = None  # First 6 digits (IIN)
    last_4_digits: str | None = None
    bank_name: str | None = None
    bank_phone_country_code: str | None = None
    bank_phone_number: str | None = None
    avs_result: str | None = Field(default=None, max_length=1)
    cvv_result: str | None = Field(default=None, max_length=1)

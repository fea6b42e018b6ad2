"""Syntax checks for user-supplied identifiers."""

from fraud_request.validation.email import is_valid_address, is_valid_domain_name

__all__ = [
    "is_valid_address",
    "is_valid_domain_name",
]

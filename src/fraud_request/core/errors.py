"""Custom exception hierarchy for request construction and serialization."""

from __future__ import annotations

from typing import Any


class FraudRequestError(Exception):
    """Base exception for all request-building errors."""


# --- Configuration ---
class ConfigError(FraudRequestError):
    """Invalid or unreadable configuration."""


# --- Input ---
class InvalidInputError(FraudRequestError, ValueError):
    """A builder setter rejected the supplied value."""

    def __init__(self, field: str, value: Any, reason: str = "") -> None:
        self.field = field
        self.value = value
        self.reason = reason
        message = f"{value!r} is not a valid {field}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# --- Event time ---
class TimeParseError(FraudRequestError):
    """A stored event timestamp could not be parsed back."""

    def __init__(self, value: str, fmt: str) -> None:
        self.value = value
        self.fmt = fmt
        super().__init__(f"Event time {value!r} does not match {fmt!r}")


# --- Serialization ---
class SerializationError(FraudRequestError):
    """The request could not be encoded as JSON."""

"""Structured logging setup."""

from fraud_request.observability.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]

"""Device data for the scoring request."""

from __future__ import annotations

from pydantic import IPvAnyAddress

from .base import RequestModel


class Device(RequestModel):
    """The device the end user made the request from."""

    ip_address: IPvAnyAddress | None = None
    user_agent: str | None = None
    accept_language: str | None = None

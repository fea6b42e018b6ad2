"""Account related data for the scoring request."""

from __future__ import annotations

from fraud_request.core.digest import md5_hex

from .base import ModelBuilder, RequestModel


class AccountBuilder(ModelBuilder["Account"]):
    def username(self, username: str) -> AccountBuilder:
        """Set the login name.  Only its MD5 is kept, never the raw value."""
        return self._set("username_md5", md5_hex(username))


class Account(RequestModel):
    """The end-user account the request is made for."""

    # Internal ID that does not change if the login name does.
    user_id: str | None = None
    username_md5: str | None = None

    @classmethod
    def builder(cls) -> AccountBuilder:
        return AccountBuilder(cls)

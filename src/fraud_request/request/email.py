"""Email address and domain of the end user.

The email builder is the one builder with real rules:

- ``address()`` and ``domain()`` are syntax-checked immediately unless
  the builder was created with ``validate=False``.
- Setting an address infers the domain (text after the last ``@``)
  unless a domain was set explicitly.  An explicit domain always wins,
  whatever the call order.
- ``hash_address()`` asks ``build()`` to replace the address with the
  MD5 of its lowercased form.  The raw value stays in the builder until
  then, so repeated calls never hash twice.
"""

from __future__ import annotations

import enum

from pydantic import Field

from fraud_request.core.digest import md5_hex
from fraud_request.core.errors import InvalidInputError
from fraud_request.observability.logger import get_logger
from fraud_request.validation.email import is_valid_address, is_valid_domain_name

from .base import RequestModel

logger = get_logger(__name__)


class DomainSource(str, enum.Enum):
    """Where the builder's pending domain came from."""

    UNSET = "unset"
    EXPLICIT = "explicit"
    INFERRED = "inferred"


class Email(RequestModel):
    """Email data sent with the request.

    ``address`` holds either the raw address or, when the builder was
    asked to hash it, the MD5 digest.  ``address_md5`` is only populated
    in the hashed case and is never serialized.
    """

    address: str | None = None
    domain: str | None = None
    address_md5: str | None = Field(default=None, exclude=True)

    @classmethod
    def builder(cls, validate: bool = True) -> EmailBuilder:
        return EmailBuilder(validate=validate)

    def normalized_address_md5(self) -> str | None:
        """MD5 of the lowercased address, whether or not it was hashed."""
        if self.address_md5 is not None:
            return self.address_md5
        if self.address is None:
            return None
        return md5_hex(self.address.lower())


class EmailBuilder:
    """Builds ``Email`` instances.

    Parameters
    ----------
    validate:
        When False, addresses and domains are accepted without any
        syntax check.  Fixed for the lifetime of the builder.
    """

    def __init__(self, validate: bool = True) -> None:
        self._validate = validate
        self._address: str | None = None
        self._domain: str | None = None
        self._domain_source = DomainSource.UNSET
        self._hash_address = False

    @property
    def validating(self) -> bool:
        return self._validate

    def address(self, address: str) -> EmailBuilder:
        """Set the address, inferring the domain if none was set explicitly."""
        if self._validate:
            if not is_valid_address(address):
                logger.info("email.address_rejected")
                raise InvalidInputError("address", address, "not a valid email address")
        else:
            logger.debug("email.address_validation_bypassed")

        self._address = address
        if self._domain_source is not DomainSource.EXPLICIT:
            self._infer_domain(address)
        return self

    def domain(self, domain: str) -> EmailBuilder:
        """Set the domain explicitly.  Inference will not override it."""
        if self._validate:
            if not is_valid_domain_name(domain):
                logger.info("email.domain_rejected", domain=domain)
                raise InvalidInputError("domain", domain, "not a valid domain name")
        else:
            logger.debug("email.domain_validation_bypassed", domain=domain)

        self._domain = domain
        self._domain_source = DomainSource.EXPLICIT
        return self

    def hash_address(self) -> EmailBuilder:
        """Send the MD5 of the lowercased address instead of the address."""
        self._hash_address = True
        return self

    def build(self) -> Email:
        address = self._address
        address_md5 = None
        if self._hash_address and address is not None:
            address_md5 = md5_hex(address.lower())
            address = address_md5
            logger.debug("email.address_hashed")
        return Email(address=address, domain=self._domain, address_md5=address_md5)

    def _infer_domain(self, address: str) -> None:
        _, at, domain = address.rpartition("@")
        if at and domain:
            self._domain = domain
            self._domain_source = DomainSource.INFERRED
            logger.debug("email.domain_inferred", domain=domain)
        else:
            self._domain = None
            self._domain_source = DomainSource.UNSET

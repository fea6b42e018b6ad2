"""Email address and domain name syntax checks.

Both predicates are advisory: they return a bool and never raise.  The
email builder decides whether a failed check is an error.

Local parts are checked by ``email-validator`` with deliverability
checks disabled, so no DNS lookup ever happens.  Domain names, including
the domain of an address, follow the RFC 1035 host-name grammar;
internationalized names are checked on their IDNA (punycode) form.
Reserved names such as ``.test`` or ``.local`` are syntactically valid.
"""

from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email

# One DNS label: letters, digits and inner hyphens, 1-63 characters.
_LABEL_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")

_MAX_DOMAIN_LENGTH = 253
_MAX_ADDRESS_LENGTH = 254

# email-validator refuses reserved domains outright, so the local part is
# checked against an ordinary domain and the real domain is checked here.
_LOCAL_PART_DOMAIN = "test.org"


def is_valid_address(value: str) -> bool:
    """Return True if *value* is a syntactically valid email address.

    Quoted local parts may contain ``@`` (``"a@b"@test.org``); any
    other additional ``@`` makes the address invalid.  The domain must
    pass ``is_valid_domain_name`` (without a trailing dot) or be an
    address literal such as ``[192.0.2.1]``.
    """
    if not isinstance(value, str) or not value:
        return False
    if value != value.strip() or len(value) > _MAX_ADDRESS_LENGTH:
        return False

    local, at, domain = value.rpartition("@")
    if not at or not local or not domain:
        return False
    if domain.startswith("["):
        return _email_validator_accepts(value)
    if domain.endswith(".") or not is_valid_domain_name(domain):
        return False
    return _email_validator_accepts(f"{local}@{_LOCAL_PART_DOMAIN}")


def _email_validator_accepts(address: str) -> bool:
    try:
        validate_email(
            address,
            check_deliverability=False,
            allow_smtputf8=True,
            allow_quoted_local=True,
            allow_domain_literal=True,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        return False
    return True


def is_valid_domain_name(value: str) -> bool:
    """Return True if *value* is a syntactically valid DNS domain name."""
    if not isinstance(value, str) or not value:
        return False
    if value != value.strip() or "@" in value:
        return False

    name = value[:-1] if value.endswith(".") else value
    if not name.isascii():
        try:
            name = name.encode("idna").decode("ascii")
        except UnicodeError:
            return False

    if len(name) > _MAX_DOMAIN_LENGTH:
        return False

    labels = name.split(".")
    if len(labels) < 2:
        return False
    if not all(_LABEL_RE.match(label) for label in labels):
        return False
    # Top-level labels are never all-numeric.
    return not labels[-1].isdigit()

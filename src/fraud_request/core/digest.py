"""MD5 digest helper for values that must leave the process hashed."""

from __future__ import annotations

import hashlib


def md5_hex(value: str) -> str:
    """Return the 32-character lowercase hex MD5 of *value* (UTF-8)."""
    return hashlib.md5(value.encode("utf-8")).hexdigest()

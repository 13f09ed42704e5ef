"""Holder and registry address helpers."""

from __future__ import annotations

import re
from typing import Any
from uuid import uuid4

from ..errors import InvalidAddressError
from .hashing import sha256_hex

ZERO_ADDRESS = "0x" + "0" * 40

_HEX_ADDRESS_RE = re.compile(r"^0[xX][0-9a-fA-F]{40}$")


def normalize_address(value: Any) -> str:
    """Return the canonical form of an address.

    Hex addresses are lowercased. Any other non-blank string is kept as-is
    after stripping surrounding whitespace.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidAddressError(f"Invalid address: {value!r}", {"address": value})
    address = value.strip()
    if _HEX_ADDRESS_RE.match(address):
        return "0x" + address[2:].lower()
    return address


def is_zero_address(address: str) -> bool:
    return address == ZERO_ADDRESS


def new_address() -> str:
    """Generate a fresh random hex address for a newly created instance."""
    return "0x" + sha256_hex(str(uuid4()))[:40]

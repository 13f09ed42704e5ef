"""Utility helpers for addresses, hashing and time operations."""

from .address import ZERO_ADDRESS, is_zero_address, new_address, normalize_address
from .hashing import canonical_json, sha256_hex
from .time import utc_now

__all__ = [
    "ZERO_ADDRESS",
    "is_zero_address",
    "new_address",
    "normalize_address",
    "canonical_json",
    "sha256_hex",
    "utc_now",
]

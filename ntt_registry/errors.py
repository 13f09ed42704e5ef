"""Error types raised by token registries and the discovery store.

Error hierarchy:
    NTTError (base)
    ├── NotFoundError
    ├── UnauthorizedError
    │   └── InvalidSignatureError
    ├── OutOfRangeError
    ├── AlreadyRevokedError
    ├── AlreadyVotedError
    └── InvalidAddressError
"""

from __future__ import annotations

from typing import Any


class NTTError(Exception):
    """Base error for all registry and discovery errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(NTTError):
    """Unknown token id."""


class UnauthorizedError(NTTError):
    """Caller lacks the right required for the operation.

    Raised for issuer-only operations, missing delegated grants, callers
    outside the voter set, and direct mint/revoke on consensus registries.
    """


class InvalidSignatureError(UnauthorizedError):
    """Pull signature does not verify for the current owner."""


class OutOfRangeError(NTTError):
    """Enumeration index outside ``0 <= index < count``."""

    def __init__(self, index: int, count: int, details: dict[str, Any] | None = None):
        super().__init__(f"Index {index} out of range for {count} entries", details)
        self.index = index
        self.count = count


class AlreadyRevokedError(NTTError):
    """Token was revoked before."""

    def __init__(self, token_id: int):
        super().__init__(f"Token {token_id} is already revoked", {"token_id": token_id})
        self.token_id = token_id


class AlreadyVotedError(NTTError):
    """Voter already approved the pending mint or revocation."""


class InvalidAddressError(NTTError, ValueError):
    """Address is blank, not a string, or not allowed for the operation."""

"""Signatures authorizing a holder to pull a token between their own addresses.

The signed message is the canonical JSON of ``owner``, ``recipient`` and
``token_id``. Signatures are raw Ed25519 bytes encoded as unpadded base64url.
"""

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from typing import Dict, Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from ..utils.address import normalize_address
from ..utils.hashing import canonical_json


def b64url_encode(b: bytes) -> str:
    return base64.urlsafe_b64encode(b).rstrip(b"=").decode("ascii")


def b64url_decode(s: str) -> bytes:
    pad = "=" * ((4 - len(s) % 4) % 4)
    return base64.urlsafe_b64decode((s + pad).encode("ascii"))


def pull_message(token_id: int, owner: str, recipient: str) -> bytes:
    """Bytes the current owner signs to let ``recipient`` pull ``token_id``."""
    payload = {
        "owner": normalize_address(owner),
        "recipient": normalize_address(recipient),
        "token_id": token_id,
    }
    return canonical_json(payload).encode("utf-8")


def sign_pull(private_key: Ed25519PrivateKey, *, token_id: int, owner: str, recipient: str) -> str:
    return b64url_encode(private_key.sign(pull_message(token_id, owner, recipient)))


class SignatureVerifier(ABC):
    """Checks that ``signer`` produced ``signature`` over ``message``."""

    @abstractmethod
    def verify(self, signer: str, message: bytes, signature: str) -> bool:
        """Return True only for a valid signature by ``signer``."""


class Ed25519KeyRing(SignatureVerifier):
    """Maps holder addresses to Ed25519 public keys."""

    def __init__(self) -> None:
        self._keys: Dict[str, Ed25519PublicKey] = {}

    def register(self, address: str, public_key: Union[Ed25519PublicKey, bytes]) -> None:
        if isinstance(public_key, bytes):
            if len(public_key) != 32:
                raise ValueError(f"Ed25519 public key must be 32 bytes, got {len(public_key)}")
            public_key = Ed25519PublicKey.from_public_bytes(public_key)
        self._keys[normalize_address(address)] = public_key

    def public_key(self, address: str) -> Optional[Ed25519PublicKey]:
        return self._keys.get(normalize_address(address))

    def verify(self, signer: str, message: bytes, signature: str) -> bool:
        key = self.public_key(signer)
        if key is None or not isinstance(signature, str):
            return False
        try:
            raw = b64url_decode(signature)
        except (ValueError, binascii.Error):
            return False
        if len(raw) != 64:
            return False
        try:
            key.verify(raw, message)
        except InvalidSignature:
            return False
        return True

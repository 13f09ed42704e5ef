"""Holder-initiated migration of a token to another address they control."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..errors import InvalidSignatureError, UnauthorizedError
from ..events import Pulled
from ..exporters.base import export_event
from ..utils.address import normalize_address
from .signing import SignatureVerifier, pull_message
from .types import Capability

logger = logging.getLogger(__name__)


class PullMixin:
    """Move a token record between two addresses of the same holder.

    The recipient calls ``pull`` with a signature by the current owner over
    ``(token_id, owner, recipient)``. The token keeps its id, validity and
    issuer; only ``owner_of`` and the per-owner enumeration change.
    """

    _capability = Capability.PULL

    def __init__(self, *args, signature_verifier: SignatureVerifier, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.signature_verifier = signature_verifier

    async def pull(self, caller: str, token_id: int, owner: str, signature: str) -> None:
        recipient = self._check_recipient(caller)
        owner = normalize_address(owner)
        async with self._lock:
            token = self._get(token_id)
            if token.owner != owner:
                raise UnauthorizedError(
                    f"{owner} does not own token {token_id}",
                    {"token_id": token_id, "owner": owner},
                )
            if recipient == owner:
                raise ValueError("Recipient already owns the token.")
            message = pull_message(token_id, owner, recipient)
            if not self.signature_verifier.verify(owner, message, signature):
                raise InvalidSignatureError(
                    f"Invalid pull signature for token {token_id}",
                    {"token_id": token_id, "owner": owner, "recipient": recipient},
                )
            await export_event(
                self.exporter,
                Pulled(source=self._address, token_id=token_id, owner=owner, recipient=recipient),
            )

            self._tokens_by_owner[owner].remove(token_id)
            self._tokens_by_owner.setdefault(recipient, []).append(token_id)
            self._tokens[token_id] = replace(token, owner=recipient)
            self._holders.add(recipient)
        logger.info(f"Token {token_id} pulled from {owner} to {recipient} on {self._address}")

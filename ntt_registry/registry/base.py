"""Core ledger of non-tradable tokens for one issuing authority."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Callable, Dict, FrozenSet, List, Optional, Set, Union

from ..config import RegistryConfig
from ..errors import AlreadyRevokedError, InvalidAddressError, NotFoundError, UnauthorizedError
from ..events import Minted, Revoked
from ..exporters.base import EventExporter, export_event
from ..utils.address import is_zero_address, new_address, normalize_address
from .types import Capability, Token

logger = logging.getLogger(__name__)

CommitHook = Callable[[], None]


class TokenRegistry:
    """Issue, revoke and query tokens bound to holder addresses.

    Mutating operations are coroutines serialized by a per-instance lock.
    Each one validates, delivers its notification to the exporter, and only
    then applies the state change, so a failed call leaves no trace.
    """

    _capability = Capability.CORE

    def __init__(
        self,
        issuer: str,
        *,
        address: Optional[str] = None,
        config: Optional[RegistryConfig] = None,
        exporter: Optional[EventExporter] = None,
    ) -> None:
        self._issuer = normalize_address(issuer)
        self._address = normalize_address(address) if address is not None else new_address()
        self.config = config or RegistryConfig()
        self.exporter = exporter
        self._tokens: Dict[int, Token] = {}
        self._tokens_by_owner: Dict[str, List[int]] = {}
        self._all_tokens: List[int] = []
        self._holders: Set[str] = set()
        self._lock = asyncio.Lock()

    @property
    def address(self) -> str:
        return self._address

    @property
    def issuer(self) -> str:
        return self._issuer

    def capabilities(self) -> FrozenSet[Capability]:
        """Capabilities contributed by every class composed into this registry."""
        return frozenset(vars(klass)["_capability"] for klass in type(self).__mro__ if "_capability" in vars(klass))

    def supports(self, capability: Union[Capability, str]) -> bool:
        try:
            capability = Capability(capability)
        except ValueError:
            return False
        return capability in self.capabilities()

    # Mutations

    async def mint(self, caller: str, owner: str) -> int:
        """Mint a new token to ``owner`` and return its id."""
        caller = normalize_address(caller)
        owner = self._check_recipient(owner)
        async with self._lock:
            on_commit = self._authorize_mint(caller, owner)
            return await self._mint(caller, owner, on_commit)

    async def revoke(self, caller: str, token_id: int) -> None:
        """Mark a token invalid. The record and its enumeration slots stay."""
        caller = normalize_address(caller)
        async with self._lock:
            self._authorize_revoke(caller, token_id)
            await self._revoke(token_id)

    def _authorize_mint(self, caller: str, owner: str) -> Optional[CommitHook]:
        if caller != self._issuer:
            raise UnauthorizedError(
                f"{caller} is not allowed to mint on registry {self._address}",
                {"caller": caller, "owner": owner},
            )
        return None

    def _authorize_revoke(self, caller: str, token_id: int) -> None:
        if caller != self._issuer:
            raise UnauthorizedError(
                f"{caller} is not allowed to revoke on registry {self._address}",
                {"caller": caller, "token_id": token_id},
            )

    async def _mint(self, minter: str, owner: str, on_commit: Optional[CommitHook] = None) -> int:
        # Caller holds the lock.
        token_id = len(self._all_tokens) + 1
        await export_event(self.exporter, Minted(source=self._address, owner=owner, token_id=token_id))

        if on_commit is not None:
            on_commit()
        self._tokens[token_id] = Token(token_id=token_id, owner=owner, issuer=minter)
        self._tokens_by_owner.setdefault(owner, []).append(token_id)
        self._all_tokens.append(token_id)
        self._holders.add(owner)
        logger.info(f"Minted token {token_id} to {owner} on {self._address}")
        return token_id

    async def _revoke(self, token_id: int) -> None:
        # Caller holds the lock.
        token = self._get(token_id)
        if not token.valid:
            raise AlreadyRevokedError(token_id)
        await export_event(self.exporter, Revoked(source=self._address, owner=token.owner, token_id=token_id))

        self._tokens[token_id] = replace(token, valid=False)
        logger.info(f"Revoked token {token_id} of {token.owner} on {self._address}")

    # Queries

    def balance_of(self, owner: str) -> int:
        """Number of tokens ever minted to ``owner``, revoked ones included."""
        return len(self._tokens_by_owner.get(normalize_address(owner), ()))

    def owner_of(self, token_id: int) -> str:
        return self._get(token_id).owner

    def is_valid(self, token_id: int) -> bool:
        return self._get(token_id).valid

    def has_valid(self, owner: str) -> bool:
        """True if at least one of ``owner``'s tokens is still valid."""
        ids = self._tokens_by_owner.get(normalize_address(owner), ())
        return any(self._tokens[token_id].valid for token_id in ids)

    def token(self, token_id: int) -> Token:
        return self._get(token_id)

    def _get(self, token_id: int) -> Token:
        token = None if isinstance(token_id, bool) else self._tokens.get(token_id)
        if token is None:
            raise NotFoundError(f"Unknown token {token_id!r}", {"token_id": token_id, "registry": self._address})
        return token

    @staticmethod
    def _check_recipient(owner: str) -> str:
        owner = normalize_address(owner)
        if is_zero_address(owner):
            raise InvalidAddressError("Tokens cannot be minted to the zero address", {"owner": owner})
        return owner

"""Minting and revocation gated on approvals from a fixed voter set."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import AlreadyRevokedError, AlreadyVotedError, UnauthorizedError
from ..utils.address import normalize_address
from .base import CommitHook
from .types import Capability

logger = logging.getLogger(__name__)


def majority_quorum(voter_count: int) -> int:
    """Strict majority of ``voter_count``."""
    return voter_count // 2 + 1


class ConsensusMixin:
    """Mint or revoke once ``quorum`` distinct voters approved the same subject.

    Direct ``mint``/``revoke`` calls are rejected; the issuer is recorded as
    the minter of consensus-approved tokens. The vote set of a subject is
    cleared when its action executes.
    """

    _capability = Capability.CONSENSUS

    def __init__(self, *args, voters: Sequence[str], quorum: Optional[int] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        normalized = tuple(normalize_address(v) for v in voters)
        if not normalized:
            raise ValueError("A consensus registry needs at least one voter.")
        if len(set(normalized)) != len(normalized):
            raise ValueError("Voter addresses must be unique.")
        if quorum is None:
            quorum = self.config.quorum
        if quorum is None:
            quorum = majority_quorum(len(normalized))
        if not 1 <= quorum <= len(normalized):
            raise ValueError(f"Quorum must be between 1 and {len(normalized)}, got {quorum}.")
        self._voters: Tuple[str, ...] = normalized
        self._quorum = quorum
        self._mint_votes: Dict[str, List[str]] = {}
        self._revoke_votes: Dict[int, List[str]] = {}

    @property
    def quorum(self) -> int:
        return self._quorum

    def voters(self) -> Tuple[str, ...]:
        return self._voters

    def mint_votes(self, owner: str) -> Tuple[str, ...]:
        return tuple(self._mint_votes.get(normalize_address(owner), ()))

    def revoke_votes(self, token_id: int) -> Tuple[str, ...]:
        return tuple(self._revoke_votes.get(token_id, ()))

    async def approve_mint(self, caller: str, owner: str) -> Optional[int]:
        """Record ``caller``'s approval; mint and return the id on quorum."""
        caller = normalize_address(caller)
        owner = self._check_recipient(owner)
        async with self._lock:
            self._check_voter(caller)
            votes = self._mint_votes.get(owner, [])
            if caller in votes:
                raise AlreadyVotedError(
                    f"{caller} already approved minting for {owner}",
                    {"caller": caller, "owner": owner},
                )
            if len(votes) + 1 < self._quorum:
                self._mint_votes.setdefault(owner, []).append(caller)
                logger.info(f"Mint approval {len(votes) + 1}/{self._quorum} for {owner} on {self._address}")
                return None
            token_id = await self._mint(self._issuer, owner)
            self._mint_votes.pop(owner, None)
            return token_id

    async def approve_revoke(self, caller: str, token_id: int) -> bool:
        """Record ``caller``'s approval; revoke on quorum and return True."""
        caller = normalize_address(caller)
        async with self._lock:
            self._check_voter(caller)
            if not self._get(token_id).valid:
                raise AlreadyRevokedError(token_id)
            votes = self._revoke_votes.get(token_id, [])
            if caller in votes:
                raise AlreadyVotedError(
                    f"{caller} already approved revoking token {token_id}",
                    {"caller": caller, "token_id": token_id},
                )
            if len(votes) + 1 < self._quorum:
                self._revoke_votes.setdefault(token_id, []).append(caller)
                logger.info(f"Revoke approval {len(votes) + 1}/{self._quorum} for token {token_id} on {self._address}")
                return False
            await self._revoke(token_id)
            self._revoke_votes.pop(token_id, None)
            return True

    def _check_voter(self, caller: str) -> None:
        if caller not in self._voters:
            raise UnauthorizedError(f"{caller} is not a voter on registry {self._address}", {"caller": caller})

    def _authorize_mint(self, caller: str, owner: str) -> Optional[CommitHook]:
        raise UnauthorizedError(
            f"Registry {self._address} only mints through voter approval",
            {"caller": caller, "owner": owner},
        )

    def _authorize_revoke(self, caller: str, token_id: int) -> None:
        raise UnauthorizedError(
            f"Registry {self._address} only revokes through voter approval",
            {"caller": caller, "token_id": token_id},
        )

"""Single-use minting rights delegated by the issuer."""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional, Sequence, Set, Tuple

from ..errors import UnauthorizedError
from ..utils.address import normalize_address
from .base import CommitHook
from .types import Capability

logger = logging.getLogger(__name__)


class DelegateMixin:
    """Let operators mint one token for a given owner on the issuer's behalf.

    A grant is keyed by ``(operator, owner)``. Granting again before it is
    used refreshes the same grant rather than adding a second use.
    """

    _capability = Capability.DELEGATE

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._mint_approvals: Set[Tuple[str, str]] = set()

    async def delegate(self, caller: str, operator: str, owner: str) -> None:
        await self.delegate_batch(caller, [operator], [owner])

    async def delegate_batch(self, caller: str, operators: Sequence[str], owners: Sequence[str]) -> None:
        """Grant ``operators[i]`` the right to mint for ``owners[i]``.

        Every pair is validated before any grant is recorded.
        """
        caller = normalize_address(caller)
        if len(operators) != len(owners):
            raise ValueError(f"operators and owners differ in length: {len(operators)} != {len(owners)}")
        pairs = [(normalize_address(op), self._check_recipient(owner)) for op, owner in zip(operators, owners)]
        async with self._lock:
            if caller != self._issuer:
                raise UnauthorizedError(
                    f"{caller} is not allowed to delegate on registry {self._address}",
                    {"caller": caller},
                )
            self._mint_approvals.update(pairs)
        for operator, owner in pairs:
            logger.info(f"Delegated mint for {owner} to {operator} on {self._address}")

    def has_mint_approval(self, operator: str, owner: str) -> bool:
        return (normalize_address(operator), normalize_address(owner)) in self._mint_approvals

    def issuer_of(self, token_id: int) -> str:
        """Address that actually minted the token."""
        return self._get(token_id).issuer

    def _authorize_mint(self, caller: str, owner: str) -> Optional[CommitHook]:
        if caller == self._issuer:
            return None
        key = (caller, owner)
        if key not in self._mint_approvals:
            raise UnauthorizedError(
                f"{caller} holds no mint approval for {owner} on registry {self._address}",
                {"caller": caller, "owner": owner},
            )
        return partial(self._mint_approvals.discard, key)

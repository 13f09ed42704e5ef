"""Enumeration over a registry's tokens and holders."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..errors import OutOfRangeError
from ..utils.address import normalize_address
from .types import Capability


def _at(ids: Sequence[int], index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or index < 0 or index >= len(ids):
        raise OutOfRangeError(index, len(ids))
    return ids[index]


class EnumerableMixin:
    """Index-based access to minted tokens. Compose in front of ``TokenRegistry``."""

    _capability = Capability.ENUMERABLE

    def emitted_count(self) -> int:
        """Total number of tokens ever minted."""
        return len(self._all_tokens)

    def holders_count(self) -> int:
        """Distinct addresses that ever received a token."""
        return len(self._holders)

    def token_of_owner_by_index(self, owner: str, index: int) -> int:
        return _at(self._tokens_by_owner.get(normalize_address(owner), ()), index)

    def token_by_index(self, index: int) -> int:
        return _at(self._all_tokens, index)

    def tokens_of_owner(self, owner: str) -> Tuple[int, ...]:
        return tuple(self._tokens_by_owner.get(normalize_address(owner), ()))

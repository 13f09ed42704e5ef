"""Holder-curated index of the registries that hold tokens for them."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Tuple, Union

from ..events import Added, Removed
from ..exporters.base import EventExporter, export_event
from ..registry.types import Capability
from ..utils.address import new_address, normalize_address

logger = logging.getLogger(__name__)


class DiscoveryStore:
    """Shared reverse index from holder address to registry addresses.

    Entries are advisory: the store never checks that an address belongs to
    a registry or that the registry holds anything for the holder. ``add``
    and ``remove`` are idempotent and act on the caller's own entries only.
    """

    def __init__(self, *, address: Optional[str] = None, exporter: Optional[EventExporter] = None) -> None:
        self._address = normalize_address(address) if address is not None else new_address()
        self.exporter = exporter
        self._registries: Dict[str, List[str]] = {}
        self._lock = asyncio.Lock()

    @property
    def address(self) -> str:
        return self._address

    def supports(self, capability: Union[Capability, str]) -> bool:
        return capability == Capability.DISCOVERY

    async def add(self, caller: str, token: str) -> bool:
        """Publish ``token`` for ``caller``. Returns False if already published."""
        owner = normalize_address(caller)
        token = normalize_address(token)
        async with self._lock:
            entries = self._registries.get(owner, [])
            if token in entries:
                return False
            await export_event(self.exporter, Added(source=self._address, owner=owner, token=token))
            self._registries.setdefault(owner, []).append(token)
        logger.info(f"{owner} published registry {token}")
        return True

    async def remove(self, caller: str, token: str) -> bool:
        """Unpublish ``token`` for ``caller``. Returns False if it was absent."""
        owner = normalize_address(caller)
        token = normalize_address(token)
        async with self._lock:
            entries = self._registries.get(owner, [])
            if token not in entries:
                return False
            await export_event(self.exporter, Removed(source=self._address, owner=owner, token=token))
            entries.remove(token)
            if not entries:
                del self._registries[owner]
        logger.info(f"{owner} unpublished registry {token}")
        return True

    def get(self, owner: str) -> Tuple[str, ...]:
        return tuple(self._registries.get(normalize_address(owner), ()))

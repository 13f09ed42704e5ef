"""Registry configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RegistryConfig:
    """Metadata and consensus settings for one registry instance.

    ``quorum`` only applies to consensus registries. ``None`` means strict
    majority of the voter set.
    """

    name: str = "Non-Tradable Token"
    symbol: str = "NTT"
    base_uri: str = ""
    quorum: Optional[int] = None

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """Build a config from ``NTT_*`` environment variables."""
        defaults = cls()
        quorum_raw = os.getenv("NTT_CONSENSUS_QUORUM")
        quorum: Optional[int] = None
        if quorum_raw:
            try:
                quorum = int(quorum_raw)
            except ValueError as exc:
                raise ValueError(f"NTT_CONSENSUS_QUORUM must be an integer, got {quorum_raw!r}.") from exc
        return cls(
            name=os.getenv("NTT_REGISTRY_NAME", defaults.name),
            symbol=os.getenv("NTT_REGISTRY_SYMBOL", defaults.symbol),
            base_uri=os.getenv("NTT_BASE_URI", defaults.base_uri),
            quorum=quorum,
        )

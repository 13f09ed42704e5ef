"""Token record and capability datatypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..utils.time import utc_now


class Capability(str, Enum):
    """Interface sets a registry or store can expose."""

    CORE = "core"
    METADATA = "metadata"
    ENUMERABLE = "enumerable"
    DELEGATE = "delegate"
    CONSENSUS = "consensus"
    PULL = "pull"
    DISCOVERY = "discovery"


@dataclass(frozen=True)
class Token:
    """Ledger entry for one minted token. Records are replaced, never deleted."""

    token_id: int
    owner: str
    issuer: str
    valid: bool = True
    minted_at: datetime = field(default_factory=utc_now)

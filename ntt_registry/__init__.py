"""NTT Registry package.

Registries of non-tradable tokens: soulbound, revocable records of
achievements or credentials bound to one holder address, plus a shared
discovery store listing which registries hold tokens for a holder.
"""

from .config import RegistryConfig
from .discovery import DiscoveryStore
from .errors import (
    AlreadyRevokedError,
    AlreadyVotedError,
    InvalidAddressError,
    InvalidSignatureError,
    NotFoundError,
    NTTError,
    OutOfRangeError,
    UnauthorizedError,
)
from .registry import (
    Capability,
    ConsensusRegistry,
    DelegatedRegistry,
    PullableRegistry,
    StandardRegistry,
    Token,
    TokenRegistry,
)

__all__ = [
    "RegistryConfig",
    "DiscoveryStore",
    "NTTError",
    "NotFoundError",
    "UnauthorizedError",
    "InvalidSignatureError",
    "OutOfRangeError",
    "AlreadyRevokedError",
    "AlreadyVotedError",
    "InvalidAddressError",
    "Capability",
    "Token",
    "TokenRegistry",
    "StandardRegistry",
    "DelegatedRegistry",
    "ConsensusRegistry",
    "PullableRegistry",
]

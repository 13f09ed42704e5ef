"""Token registries and their optional extensions."""

from .base import TokenRegistry
from .composed import ConsensusRegistry, DelegatedRegistry, PullableRegistry, StandardRegistry
from .consensus import ConsensusMixin, majority_quorum
from .delegate import DelegateMixin
from .enumerable import EnumerableMixin
from .metadata import MetadataMixin
from .pull import PullMixin
from .signing import Ed25519KeyRing, SignatureVerifier, pull_message, sign_pull
from .types import Capability, Token

__all__ = [
    "TokenRegistry",
    "StandardRegistry",
    "DelegatedRegistry",
    "ConsensusRegistry",
    "PullableRegistry",
    "ConsensusMixin",
    "DelegateMixin",
    "EnumerableMixin",
    "MetadataMixin",
    "PullMixin",
    "majority_quorum",
    "Ed25519KeyRing",
    "SignatureVerifier",
    "pull_message",
    "sign_pull",
    "Capability",
    "Token",
]

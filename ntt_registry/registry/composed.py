"""Ready-to-use registry compositions."""

from __future__ import annotations

from .base import TokenRegistry
from .consensus import ConsensusMixin
from .delegate import DelegateMixin
from .enumerable import EnumerableMixin
from .metadata import MetadataMixin
from .pull import PullMixin


class StandardRegistry(MetadataMixin, EnumerableMixin, TokenRegistry):
    """Core ledger with metadata and enumeration."""


class DelegatedRegistry(DelegateMixin, StandardRegistry):
    """Standard registry whose issuer can hand out single-use mint rights."""


class ConsensusRegistry(ConsensusMixin, StandardRegistry):
    """Standard registry that mints and revokes only on voter quorum."""


class PullableRegistry(PullMixin, StandardRegistry):
    """Standard registry whose holders can move tokens between their own addresses."""

"""Discovery of the registries holding tokens for a holder."""

from .store import DiscoveryStore

__all__ = ["DiscoveryStore"]

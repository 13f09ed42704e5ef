"""Descriptive metadata for a registry and its tokens."""

from __future__ import annotations

from .types import Capability


class MetadataMixin:
    """Name, symbol and per-token URIs taken from ``RegistryConfig``."""

    _capability = Capability.METADATA

    def name(self) -> str:
        return self.config.name

    def symbol(self) -> str:
        return self.config.symbol

    def token_uri(self, token_id: int) -> str:
        """Return ``base_uri + token_id``; revoked tokens still resolve."""
        self._get(token_id)
        base_uri = self.config.base_uri
        if not base_uri:
            return ""
        return f"{base_uri}{token_id}"

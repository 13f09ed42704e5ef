"""Base exporter interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ..events import Event

logger = logging.getLogger(__name__)


class EventExporter(ABC):
    """Abstract base class for notification exporters."""

    @abstractmethod
    async def export(self, event: Event) -> None:
        """Deliver one notification. Raising aborts the emitting operation."""

    async def close(self) -> None:
        """Close exporter resources if needed."""


async def export_event(exporter: EventExporter | None, event: Event) -> None:
    """Deliver ``event`` through ``exporter`` if one is configured."""
    if exporter is None:
        return
    try:
        await exporter.export(event)
    except Exception:
        logger.exception(f"Failed to export {event.name} notification")
        raise

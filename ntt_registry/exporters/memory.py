"""In-memory notification exporter."""

from __future__ import annotations

from typing import List, Optional

from ..events import Event
from .base import EventExporter


class InMemoryExporter(EventExporter):
    """Keeps every delivered notification in arrival order."""

    def __init__(self) -> None:
        self.events: List[Event] = []

    async def export(self, event: Event) -> None:
        self.events.append(event)

    def named(self, name: str, source: Optional[str] = None) -> List[Event]:
        """Return delivered notifications with the given event name."""
        return [e for e in self.events if e.name == name and (source is None or getattr(e, "source", None) == source)]

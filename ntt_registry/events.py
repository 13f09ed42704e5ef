"""Notification records emitted by registries and the discovery store."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict

from .utils.time import utc_now


@dataclass(frozen=True)
class Event:
    """Base notification. ``source`` is the address of the emitting instance."""

    name: ClassVar[str] = "Event"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the notification for exporters."""
        payload = asdict(self)
        return {"event": self.name, **payload}


@dataclass(frozen=True)
class Minted(Event):
    name: ClassVar[str] = "Minted"

    source: str
    owner: str
    token_id: int
    occurred_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class Revoked(Event):
    name: ClassVar[str] = "Revoked"

    source: str
    owner: str
    token_id: int
    occurred_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class Pulled(Event):
    """A token record moved between two addresses of the same holder."""

    name: ClassVar[str] = "Pulled"

    source: str
    token_id: int
    owner: str
    recipient: str
    occurred_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class Added(Event):
    name: ClassVar[str] = "Added"

    source: str
    owner: str
    token: str
    occurred_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class Removed(Event):
    name: ClassVar[str] = "Removed"

    source: str
    owner: str
    token: str
    occurred_at: datetime = field(default_factory=utc_now)

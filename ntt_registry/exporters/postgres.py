"""PostgreSQL exporter for registry notifications."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

import asyncpg

from ..events import Event
from ..utils.hashing import canonical_json
from .base import EventExporter
from .memory import InMemoryExporter

logger = logging.getLogger(__name__)


CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS ntt_events (
    id BIGSERIAL PRIMARY KEY,
    event TEXT NOT NULL,
    source TEXT NOT NULL,
    payload JSONB NOT NULL,
    occurred_at TIMESTAMPTZ NOT NULL
)
"""

INSERT_SQL = """
INSERT INTO ntt_events (event, source, payload, occurred_at)
VALUES ($1, $2, $3::jsonb, $4)
"""


class PostgresExporter(EventExporter):
    """Exporter that persists notifications into PostgreSQL using ``asyncpg``."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        *,
        pool: Optional[asyncpg.Pool] = None,
        min_size: int = 1,
        max_size: int = 4,
    ) -> None:
        self._dsn = dsn
        self._pool = pool
        self._min_size = min_size
        self._max_size = max_size
        self._connect_lock = asyncio.Lock()

    async def connect(self) -> None:
        """Initialize a connection pool if one was not supplied."""
        if self._pool is not None:
            return
        if not self._dsn:
            raise ValueError("Either `dsn` or `pool` must be provided for PostgresExporter.")

        async with self._connect_lock:
            # Concurrent exports share one pool.
            if self._pool is None:
                self._pool = await asyncpg.create_pool(
                    dsn=self._dsn,
                    min_size=self._min_size,
                    max_size=self._max_size,
                )

    async def ensure_schema(self) -> None:
        """Create the ``ntt_events`` table if it does not exist."""
        if self._pool is None:
            await self.connect()
        assert self._pool is not None
        async with self._pool.acquire() as conn:
            await conn.execute(CREATE_TABLE_SQL)

    async def export(self, event: Event) -> None:
        """Insert one notification row."""
        if self._pool is None:
            await self.connect()

        assert self._pool is not None
        payload = event.to_dict()
        async with self._pool.acquire() as conn:
            await conn.execute(
                INSERT_SQL,
                event.name,
                payload.get("source", ""),
                canonical_json(payload),
                payload["occurred_at"],
            )

    async def close(self) -> None:
        """Close the underlying pool if it exists."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None


def create_exporter_from_env() -> EventExporter:
    """Create a Postgres exporter if a DSN is configured, otherwise in-memory."""
    dsn = os.getenv("NTT_REGISTRY_PG_DSN") or os.getenv("DATABASE_URL")
    if dsn:
        logger.info("Exporting registry notifications to PostgreSQL")
        return PostgresExporter(dsn=dsn)
    return InMemoryExporter()

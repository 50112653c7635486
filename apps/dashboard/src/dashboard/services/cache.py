"""In-memory cache of the latest workload statuses."""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Mapping

from ..models import WorkloadStatus


class ReadWriteLock:
    """Asyncio reader/writer lock.

    Readers share the lock; a writer holds it alone. Once a writer is
    waiting, new readers queue behind it.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and not self._writers_waiting
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class StatusCache:
    """Latest workload statuses keyed by ``namespace/name``.

    The whole mapping is swapped on every successful poll; there is no
    merge with previous contents.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._statuses: dict[str, WorkloadStatus] = {}
        self.updated_at: datetime | None = None

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock

    def __len__(self) -> int:
        return len(self._statuses)

    async def replace(self, statuses: Mapping[str, WorkloadStatus]) -> None:
        """Replace the cache contents with ``statuses``."""
        async with self._lock.write():
            self._statuses = dict(statuses)
            self.updated_at = datetime.now(timezone.utc)

    async def snapshot(self) -> list[WorkloadStatus]:
        """Return all cached statuses."""
        async with self._lock.read():
            return list(self._statuses.values())

    async def get(self, key: str) -> WorkloadStatus | None:
        """Look up one status by exact key."""
        async with self._lock.read():
            return self._statuses.get(key)

    async def keys(self) -> set[str]:
        async with self._lock.read():
            return set(self._statuses)

"""Explicitly constructed service state shared by the poller and handlers."""

from dataclasses import dataclass

import httpx

from .collectors import CollectorClient, StatusPoller
from .core.config import Settings
from .services import StatusCache


@dataclass
class DashboardContext:
    """Everything a request handler or the poller needs."""

    settings: Settings
    cache: StatusCache
    client: CollectorClient
    poller: StatusPoller

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "DashboardContext":
        """Build the cache, collector client and poller for ``settings``."""
        cache = StatusCache()
        client = CollectorClient(
            settings.collector_url,
            timeout=settings.collector_timeout,
            transport=transport,
        )
        poller = StatusPoller(client, cache, interval=settings.poll_interval)
        return cls(settings=settings, cache=cache, client=client, poller=poller)

    async def start(self) -> None:
        await self.poller.start()

    async def close(self) -> None:
        await self.poller.stop()
        await self.client.close()

"""Background poller that refreshes the status cache from the collector."""

import asyncio
from datetime import datetime, timezone

from ..core.logging import get_logger
from ..services.cache import StatusCache
from ..services.mapper import convert_report, workload_key
from .client import CollectorClient
from .errors import CollectorError

logger = get_logger(__name__)


class StatusPoller:
    """Polls the collector on a fixed interval and replaces the cache.

    The first cycle runs as soon as the poller starts. Failed cycles leave
    the previous cache contents in place and are retried on the next tick.
    """

    def __init__(
        self,
        client: CollectorClient,
        cache: StatusCache,
        interval: float = 30.0,
    ) -> None:
        self.client = client
        self.cache = cache
        self.interval = interval
        self.cycles = 0
        self.last_poll_at: datetime | None = None
        self.last_success_at: datetime | None = None
        self.last_error: str | None = None
        self._running = False
        self._poll_task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the polling loop."""
        if self._poll_task is not None:
            return
        self._running = True
        logger.info(
            "collector_poller_starting",
            url=self.client.reports_url,
            interval=self.interval,
        )
        self._poll_task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Stop the polling loop."""
        self._running = False
        if self._poll_task:
            self._poll_task.cancel()
            try:
                await self._poll_task
            except asyncio.CancelledError:
                pass
            self._poll_task = None
        logger.info("collector_poller_stopped")

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        loop = asyncio.get_running_loop()
        next_run = loop.time()
        while self._running:
            await self.poll_once()

            # Fixed rate: schedule from the start of the previous cycle
            next_run += self.interval
            delay = next_run - loop.time()
            if delay < 0:
                # Missed ticks are dropped, like a ticker
                next_run = loop.time()
                delay = 0
            await asyncio.sleep(delay)

    async def poll_once(self) -> bool:
        """Run one fetch-and-replace cycle.

        Returns True if the cache was replaced.
        """
        self.last_poll_at = datetime.now(timezone.utc)
        try:
            return await self._refresh()
        finally:
            self.cycles += 1

    async def _refresh(self) -> bool:
        try:
            reports = await self.client.fetch_reports()
        except CollectorError as e:
            self.last_error = str(e)
            logger.warning("collector_fetch_failed", url=self.client.reports_url, error=str(e))
            return False
        except Exception as e:
            self.last_error = str(e)
            logger.error("collector_poll_error", error=str(e), exc_info=True)
            return False

        logger.info("collector_reports_fetched", count=len(reports))

        now = datetime.now(timezone.utc)
        statuses = {
            workload_key(report.namespace, report.pod_name): convert_report(report, now)
            for report in reports
        }
        await self.cache.replace(statuses)

        self.last_success_at = now
        self.last_error = None
        return True

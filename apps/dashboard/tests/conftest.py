from typing import Any, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dashboard.context import DashboardContext
from dashboard.core.config import Settings
from dashboard.main import create_app

from .factories import FakeCollector

COLLECTOR_URL = "http://collector.test:8080"


@pytest.fixture
def collector() -> FakeCollector:
    return FakeCollector()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        collector_url=COLLECTOR_URL,
        poll_interval=30,
        collector_timeout=10,
        static_dir=str(tmp_path / "missing"),
    )


@pytest_asyncio.fixture
async def context(settings, collector):
    """Service context wired to the fake collector; the poller is not started."""
    ctx = DashboardContext.from_settings(settings, transport=collector.transport)
    yield ctx
    await ctx.close()


@pytest.fixture
def app(context):
    return create_app(context=context)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def populate(context, collector) -> Callable:
    """Serve ``reports`` from the fake collector and run one poll cycle."""

    async def _populate(*reports: dict[str, Any]) -> bool:
        collector.reports = list(reports)
        return await context.poller.poll_once()

    return _populate

"""Tests for application startup and shutdown."""

import asyncio

import pytest
from structlog.testing import capture_logs

from dashboard import main
from dashboard.main import create_app

from .factories import create_report_payload


async def test_lifespan_starts_and_stops_poller(context, collector):
    collector.reports = [create_report_payload(pod_name="a", namespace="ns")]
    app = create_app(context=context)

    async with app.router.lifespan_context(app):
        assert context.poller.running
        for _ in range(100):
            if context.poller.cycles:
                break
            await asyncio.sleep(0.01)

        assert context.poller.cycles == 1
        assert await context.cache.keys() == {"ns/a"}

    assert not context.poller.running
    assert context.client._client.is_closed


@pytest.mark.parametrize("failure", [OSError(98, "Address already in use"), SystemExit(3)])
def test_run_exits_when_listener_fails(monkeypatch, settings, failure):
    def fail(*args, **kwargs):
        raise failure

    monkeypatch.setattr(main, "get_settings", lambda: settings)
    monkeypatch.setattr(main, "configure_logging", lambda settings: None)
    monkeypatch.setattr(main.uvicorn, "run", fail)

    with capture_logs() as logs, pytest.raises(SystemExit) as exc_info:
        main.run()

    assert exc_info.value.code == 1
    assert any(
        entry["event"] == "server_bind_failed" and entry["log_level"] == "critical"
        for entry in logs
    )

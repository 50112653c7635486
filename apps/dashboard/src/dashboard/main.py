"""Dashboard backend application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from . import __version__
from .api import CORSMiddleware, RequestLoggingMiddleware, health_router, router
from .context import DashboardContext
from .core.config import Settings, get_settings
from .core.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the collector poller for the lifetime of the application."""
    ctx: DashboardContext = app.state.context
    logger.info("dashboard_starting", collector_url=ctx.settings.collector_url)
    await ctx.start()
    try:
        yield
    finally:
        await ctx.close()
        logger.info("dashboard_stopped")


def create_app(
    settings: Settings | None = None,
    context: DashboardContext | None = None,
) -> FastAPI:
    """Build the dashboard application."""
    settings = settings or (context.settings if context else get_settings())
    context = context or DashboardContext.from_settings(settings)

    app = FastAPI(
        title="Attestation Compliance Dashboard",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.context = context

    app.include_router(health_router)
    app.include_router(router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("static_dir_missing", path=str(static_dir))

    # Last added runs first: logging wraps CORS
    app.add_middleware(CORSMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    return app


def run() -> None:
    """Start the HTTP server."""
    settings = get_settings()
    configure_logging(settings)
    app = create_app(settings)

    logger.info("dashboard_listening", host=settings.host, port=settings.port)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level="warning")
    except (OSError, SystemExit) as e:
        # uvicorn exits on its own when the socket cannot be bound
        logger.critical("server_bind_failed", port=settings.port, error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()

"""Health check endpoints."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse

from ..context import DashboardContext
from .dependencies import get_context

router = APIRouter(tags=["health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def health_check() -> str:
    """Basic health check."""
    return "ok"


@router.get("/readyz")
async def readiness_check(
    response: Response,
    ctx: DashboardContext = Depends(get_context),
) -> dict:
    """Ready once the first poll cycle has finished, whatever its outcome."""
    poller = ctx.poller
    if not poller.cycles:
        response.status_code = 503
        return {"status": "not ready"}

    return {
        "status": "ready",
        "workloads": len(ctx.cache),
        "last_success": poller.last_success_at.isoformat() if poller.last_success_at else None,
        "last_error": poller.last_error,
    }


@router.get("/livez")
async def liveness_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "alive"}

"""Dashboard API routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from ..context import DashboardContext
from ..models import DashboardResponse, WorkloadStatus
from ..services import build_dashboard, demo_response
from .dependencies import get_context

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get(
    "/status",
    response_model=DashboardResponse,
    response_model_exclude_none=True,
)
async def get_status(
    ctx: DashboardContext = Depends(get_context),
) -> DashboardResponse:
    """Overall compliance verdict and all workload statuses."""
    statuses = await ctx.cache.snapshot()
    if not statuses:
        return demo_response()
    return build_dashboard(statuses)


@router.get(
    "/workloads",
    response_model=list[WorkloadStatus],
    response_model_exclude_none=True,
)
async def list_workloads(
    ctx: DashboardContext = Depends(get_context),
) -> list[WorkloadStatus]:
    """All cached workload statuses."""
    statuses = await ctx.cache.snapshot()
    if not statuses:
        return demo_response().workloads
    return statuses


@router.get(
    "/workload/{name:path}",
    response_model=WorkloadStatus,
    response_model_exclude_none=True,
)
async def get_workload(
    name: str,
    ctx: DashboardContext = Depends(get_context),
) -> WorkloadStatus:
    """Look up one workload by its ``namespace/name`` key."""
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="workload name required",
        )

    workload = await ctx.cache.get(name)
    if workload is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="workload not found",
        )
    return workload

"""Dashboard response assembly."""

from datetime import datetime, timedelta, timezone
from typing import Iterable

from ..models import (
    AttestationStatus,
    DashboardResponse,
    GateStatus,
    OverallStatus,
    WorkloadStatus,
)
from .mapper import format_rfc3339


def is_violation(status: WorkloadStatus) -> bool:
    """Check whether a workload breaks compliance."""
    return not status.attested or status.gate_two_status == GateStatus.FAILED


def build_dashboard(
    statuses: Iterable[WorkloadStatus],
    now: datetime | None = None,
) -> DashboardResponse:
    """Build the dashboard overview from cached statuses."""
    workloads = list(statuses)
    overall = (
        OverallStatus.VIOLATION
        if any(is_violation(s) for s in workloads)
        else OverallStatus.COMPLIANT
    )
    return DashboardResponse(
        overall_status=overall,
        workloads=workloads,
        last_updated=now or datetime.now(timezone.utc),
    )


def demo_response(now: datetime | None = None) -> DashboardResponse:
    """Canned response shown while no collector data has been cached."""
    now = now or datetime.now(timezone.utc)
    return DashboardResponse(
        overall_status=OverallStatus.COMPLIANT,
        workloads=[
            WorkloadStatus(
                name="clinical-ai-model-v1.3",
                namespace="demo",
                attested=True,
                attestation_status=AttestationStatus.VERIFIED,
                timestamp=format_rfc3339(now - timedelta(minutes=15)),
                details="TEE attestation successful",
                gate_one_status=GateStatus.PASSING,
                gate_two_status=GateStatus.PASSING,
                last_checked=now,
            ),
            WorkloadStatus(
                name="records-backup-service",
                namespace="demo",
                attested=True,
                attestation_status=AttestationStatus.VERIFIED,
                timestamp=format_rfc3339(now - timedelta(minutes=45)),
                details="Container signature verified, TEE attestation passed",
                gate_one_status=GateStatus.PASSING,
                gate_two_status=GateStatus.PASSING,
                last_checked=now,
            ),
        ],
        last_updated=now,
    )

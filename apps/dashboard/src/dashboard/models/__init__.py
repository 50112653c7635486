"""Dashboard data models."""

from .attestation import AttestationReport, CollectorModel, TrustTier, TrustVector
from .workload import (
    AttestationStatus,
    DashboardResponse,
    GateStatus,
    OverallStatus,
    WorkloadStatus,
)

__all__ = [
    # Attestation
    "AttestationReport",
    "CollectorModel",
    "TrustTier",
    "TrustVector",
    # Workload
    "AttestationStatus",
    "DashboardResponse",
    "GateStatus",
    "OverallStatus",
    "WorkloadStatus",
]

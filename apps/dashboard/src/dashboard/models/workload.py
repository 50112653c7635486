"""Workload status and dashboard response models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class AttestationStatus(str, Enum):
    """Attestation verdict for a workload."""
    VERIFIED = "verified"
    FAILED = "failed"


class GateStatus(str, Enum):
    """Compliance gate status."""
    PASSING = "passing"
    FAILED = "failed"


class OverallStatus(str, Enum):
    """Aggregate dashboard verdict."""
    COMPLIANT = "compliant"
    VIOLATION = "violation"


class WorkloadStatus(BaseModel):
    """Attestation status of a confidential workload."""

    name: str
    namespace: str
    attested: bool
    attestation_status: AttestationStatus
    timestamp: str = Field("", description="RFC 3339 time of the underlying report")
    details: str = ""
    gate_one_status: GateStatus = Field(..., description="Code integrity")
    gate_two_status: GateStatus = Field(..., description="TEE attestation")
    last_checked: datetime
    tee_type: str | None = None


class DashboardResponse(BaseModel):
    """API response for the dashboard overview."""

    overall_status: OverallStatus
    workloads: list[WorkloadStatus] = []
    last_updated: datetime

"""Conversion of collector reports into workload statuses."""

from datetime import datetime, timezone

from ..models import (
    AttestationReport,
    AttestationStatus,
    GateStatus,
    TrustTier,
    WorkloadStatus,
)

FAILED_DETAILS = "TEE attestation failed - not running in genuine confidential environment"


def workload_key(namespace: str, name: str) -> str:
    """Cache key for a workload."""
    return f"{namespace}/{name}"


def trust_tier_to_string(tier: int) -> str:
    """Render an EAR trust tier code for display."""
    try:
        return TrustTier(tier).name.title()
    except ValueError:
        return f"Unknown({tier})"


def format_rfc3339(value: datetime | None) -> str:
    """Format a timestamp as RFC 3339 with second precision.

    Naive datetimes are taken to be UTC. UTC is rendered with a ``Z``
    suffix; any other offset is kept as-is. A missing timestamp renders
    as ``""`` rather than the zero time ``0001-01-01T00:00:00Z``, so the
    frontend can tell "never reported" from a real capture time.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def convert_report(report: AttestationReport, now: datetime | None = None) -> WorkloadStatus:
    """Convert a collector report to a workload status.

    Gate 1 (code integrity) is not evaluated here and is reported passing
    for every report. Gate 2 tracks the TEE attestation result directly.
    """
    if report.attested:
        attestation_status = AttestationStatus.VERIFIED
        gate_two = GateStatus.PASSING
        if report.trust_vector is not None:
            tv = report.trust_vector
            details = (
                f"TEE attestation successful ({report.tee_type}) - "
                f"Hardware: {trust_tier_to_string(tv.hardware)}, "
                f"Config: {trust_tier_to_string(tv.configuration)}, "
                f"Executables: {trust_tier_to_string(tv.executables)}"
            )
        else:
            details = f"TEE attestation successful ({report.tee_type})"
    else:
        attestation_status = AttestationStatus.FAILED
        gate_two = GateStatus.FAILED
        details = report.error or FAILED_DETAILS

    return WorkloadStatus(
        name=report.pod_name,
        namespace=report.namespace,
        attested=report.attested,
        attestation_status=attestation_status,
        timestamp=format_rfc3339(report.timestamp),
        details=details,
        gate_one_status=GateStatus.PASSING,
        gate_two_status=gate_two,
        last_checked=now or datetime.now(timezone.utc),
        tee_type=report.tee_type or None,
    )

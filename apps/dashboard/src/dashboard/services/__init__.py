"""Dashboard business logic services."""

from .cache import ReadWriteLock, StatusCache
from .dashboard import build_dashboard, demo_response, is_violation
from .mapper import convert_report, format_rfc3339, trust_tier_to_string, workload_key

__all__ = [
    "ReadWriteLock",
    "StatusCache",
    "build_dashboard",
    "demo_response",
    "is_violation",
    "convert_report",
    "format_rfc3339",
    "trust_tier_to_string",
    "workload_key",
]

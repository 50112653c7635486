"""Attestation Collector integration."""

from .client import CollectorClient
from .errors import (
    CollectorDecodeError,
    CollectorError,
    CollectorStatusError,
    CollectorUnavailableError,
)
from .poller import StatusPoller

__all__ = [
    "CollectorClient",
    "CollectorError",
    "CollectorDecodeError",
    "CollectorStatusError",
    "CollectorUnavailableError",
    "StatusPoller",
]

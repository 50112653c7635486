"""Collector client errors."""


class CollectorError(Exception):
    """A poll cycle could not obtain reports from the collector."""


class CollectorUnavailableError(CollectorError):
    """The collector could not be reached or did not answer in time."""


class CollectorStatusError(CollectorError):
    """The collector answered with a non-200 status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"collector returned status {status_code}")
        self.status_code = status_code


class CollectorDecodeError(CollectorError):
    """The collector response was not a list of attestation reports."""

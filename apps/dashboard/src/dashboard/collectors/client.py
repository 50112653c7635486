"""HTTP client for the Attestation Collector reports API."""

import httpx
from pydantic import TypeAdapter, ValidationError

from ..core.logging import get_logger
from ..models import AttestationReport
from .errors import (
    CollectorDecodeError,
    CollectorStatusError,
    CollectorUnavailableError,
)

logger = get_logger(__name__)

REPORTS_PATH = "/api/v1/reports"

_reports_adapter = TypeAdapter(list[AttestationReport])


class CollectorClient:
    """Fetches attestation reports from the collector."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def reports_url(self) -> str:
        return f"{self.base_url}{REPORTS_PATH}"

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def fetch_reports(self) -> list[AttestationReport]:
        """Fetch all attestation reports.

        Raises:
            CollectorUnavailableError: transport failure or timeout
            CollectorStatusError: any status other than 200
            CollectorDecodeError: body is not a JSON array of reports
        """
        try:
            response = await self._client.get(self.reports_url)
        except httpx.HTTPError as e:
            raise CollectorUnavailableError(str(e) or type(e).__name__) from e

        if response.status_code != httpx.codes.OK:
            raise CollectorStatusError(response.status_code)

        try:
            reports = _reports_adapter.validate_json(response.content)
        except ValidationError as e:
            raise CollectorDecodeError(
                f"invalid reports payload ({e.error_count()} errors)"
            ) from e

        logger.debug("collector_reports_decoded", url=self.reports_url, count=len(reports))
        return reports

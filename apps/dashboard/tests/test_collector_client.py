"""Tests for the Attestation Collector client."""

import httpx
import pytest

from dashboard.collectors import (
    CollectorClient,
    CollectorDecodeError,
    CollectorError,
    CollectorStatusError,
    CollectorUnavailableError,
)

from .factories import AFFIRMING_VECTOR, FakeCollector, create_report_payload


@pytest.fixture
async def collector_client(collector):
    client = CollectorClient("http://collector.test:8080/", transport=collector.transport)
    yield client
    await client.close()


async def test_fetch_reports(collector: FakeCollector, collector_client):
    collector.reports = [
        create_report_payload(pod_name="x", namespace="ns", trust_vector=AFFIRMING_VECTOR),
        create_report_payload(pod_name="y", namespace="ns", attested=False, error="boom"),
    ]

    reports = await collector_client.fetch_reports()

    assert [r.pod_name for r in reports] == ["x", "y"]
    assert reports[0].trust_vector.hardware == 2
    assert reports[0].trust_vector.file_system == 0
    assert reports[1].attested is False
    assert reports[1].error == "boom"

    request = collector.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "http://collector.test:8080/api/v1/reports"


async def test_fetch_empty_list(collector, collector_client):
    collector.reports = []
    assert await collector_client.fetch_reports() == []


async def test_unknown_fields_are_ignored(collector, collector_client):
    payload = create_report_payload()
    payload["ear_token"] = "eyJhbGciOi..."
    payload["node"] = "worker-1"
    collector.reports = [payload]

    reports = await collector_client.fetch_reports()

    assert reports[0].ear_token == "eyJhbGciOi..."


@pytest.mark.parametrize("status_code", [404, 500, 503])
async def test_non_200_status(collector, collector_client, status_code):
    collector.status_code = status_code

    with pytest.raises(CollectorStatusError) as exc_info:
        await collector_client.fetch_reports()

    assert exc_info.value.status_code == status_code


async def test_transport_failure(collector, collector_client):
    collector.error = httpx.ConnectError("connection refused")

    with pytest.raises(CollectorUnavailableError, match="connection refused"):
        await collector_client.fetch_reports()


async def test_timeout(collector, collector_client):
    collector.error = httpx.ReadTimeout("timed out")

    with pytest.raises(CollectorUnavailableError):
        await collector_client.fetch_reports()


async def test_missing_fields_decode_as_zero_values(collector, collector_client):
    collector.body = b'[{"namespace": "ns"}, {}]'

    reports = await collector_client.fetch_reports()

    assert reports[0].pod_name == ""
    assert reports[0].namespace == "ns"
    assert reports[0].attested is False
    assert reports[1].namespace == ""


async def test_null_fields_decode_as_zero_values(collector, collector_client):
    collector.body = (
        b'[{"pod_name": "x", "namespace": "ns", "tee_type": null, "attested": null,'
        b' "error": null, "ear_token": null, "timestamp": null,'
        b' "trust_vector": {"hardware": null, "configuration": 2, "executables": null}}]'
    )

    [report] = await collector_client.fetch_reports()

    assert report.tee_type == ""
    assert report.attested is False
    assert report.error == ""
    assert report.ear_token is None
    assert report.timestamp is None
    assert report.trust_vector.hardware == 0
    assert report.trust_vector.configuration == 2


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"null",
        b'{"pod_name": "x", "namespace": "ns"}',
        b'[{"pod_name": "x", "namespace": "ns", "attested": "maybe"}]',
    ],
)
async def test_malformed_payload(collector, collector_client, body):
    collector.body = body

    with pytest.raises(CollectorDecodeError):
        await collector_client.fetch_reports()


def test_errors_share_base_class():
    for error in (CollectorDecodeError, CollectorStatusError, CollectorUnavailableError):
        assert issubclass(error, CollectorError)


def test_timeout_is_configured():
    client = CollectorClient("http://collector.test", timeout=10)
    assert client.timeout == 10
    assert client._client.timeout.read == 10

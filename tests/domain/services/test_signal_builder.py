"""Tests for the evidence signal builder."""

import asyncio

import httpx
import pytest

from fact_checker.domain.models.claim import Claim
from fact_checker.domain.models.evidence import EvidenceSignal, Vote
from fact_checker.domain.ports.evidence_provider import ProviderConfig, ProviderRequest
from fact_checker.domain.services.signal_builder import EvidenceSignalBuilder

CLAIM = Claim(text="  The Moon is made of cheese  ")


def _build_request(claim: Claim) -> ProviderRequest:
    return ProviderRequest(
        url="https://provider.test/check",
        headers={"x-api-key": "secret"},
        body={"query": claim.text},
    )


def _parse_response(payload) -> EvidenceSignal:
    return EvidenceSignal(
        vote=Vote(payload["vote"]),
        confidence=payload["confidence"],
        reasoning=payload["reasoning"],
        raw=payload,
    )


@pytest.fixture
def provider() -> ProviderConfig:
    """Provide a provider assembled from callables."""
    return ProviderConfig(
        name="test",
        display_name="Test Provider",
        request_builder=_build_request,
        response_parser=_parse_response,
        weight=0.6,
    )


def _assert_failure(signal: EvidenceSignal):
    assert signal.vote == Vote.NEUTRAL
    assert signal.confidence == 0.1
    assert signal.sources == []
    assert signal.reasoning == "Test Provider failed"
    assert signal.provider == "test"
    assert signal.weight == 0.6


@pytest.mark.asyncio
async def test_build_signal_success(provider, mock_http_client, decode_request):
    """Test a successful provider call."""
    client = mock_http_client(
        lambda request: httpx.Response(
            200, json={"vote": "contradict", "confidence": 0.8, "reasoning": "FALSE"}
        )
    )
    builder = EvidenceSignalBuilder(client=client)

    signal = await builder.build_signal(CLAIM, provider)

    assert signal.vote == Vote.CONTRADICT
    assert signal.confidence == 0.8
    assert signal.reasoning == "FALSE"
    assert signal.provider == "test"
    assert signal.label == "Test Provider"
    assert signal.weight == 0.6

    sent = client.sent_requests[0]
    assert sent.method == "POST"
    assert str(sent.url) == "https://provider.test/check"
    assert sent.headers["x-api-key"] == "secret"
    assert decode_request(sent) == {"query": "The Moon is made of cheese"}


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 503])
async def test_build_signal_error_status(provider, mock_http_client, status_code):
    """Test that non-success statuses degrade to the failure signal."""
    client = mock_http_client(lambda request: httpx.Response(status_code, json={"error": "nope"}))
    builder = EvidenceSignalBuilder(client=client)

    _assert_failure(await builder.build_signal(CLAIM, provider))


@pytest.mark.asyncio
async def test_build_signal_network_error(provider, mock_http_client):
    """Test that transport errors are absorbed."""
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    builder = EvidenceSignalBuilder(client=mock_http_client(handler))

    _assert_failure(await builder.build_signal(CLAIM, provider))


@pytest.mark.asyncio
async def test_build_signal_timeout(provider, mock_http_client):
    """Test that a provider slower than the timeout is absorbed like any failure."""
    async def handler(request):
        await asyncio.sleep(5)
        return httpx.Response(200, json={"vote": "support", "confidence": 0.9, "reasoning": "late"})

    builder = EvidenceSignalBuilder(client=mock_http_client(handler), timeout=0.05)

    _assert_failure(await asyncio.wait_for(builder.build_signal(CLAIM, provider), 2))


@pytest.mark.asyncio
async def test_build_signal_timeout_trickling_body(provider, mock_http_client):
    """Test that a body trickling in byte by byte is cut off at the overall timeout."""
    async def trickle():
        for char in '{"vote": "support", "confidence": 0.9, "reasoning": "slow"}':
            await asyncio.sleep(0.1)
            yield char.encode()

    def handler(request):
        return httpx.Response(200, headers={"content-type": "application/json"}, content=trickle())

    builder = EvidenceSignalBuilder(client=mock_http_client(handler), timeout=0.3)

    _assert_failure(await asyncio.wait_for(builder.build_signal(CLAIM, provider), 2))


@pytest.mark.asyncio
async def test_build_signal_invalid_json(provider, mock_http_client):
    """Test that an undecodable body is absorbed."""
    client = mock_http_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    builder = EvidenceSignalBuilder(client=client)

    _assert_failure(await builder.build_signal(CLAIM, provider))


@pytest.mark.asyncio
async def test_build_signal_parse_error(provider, mock_http_client):
    """Test that a body missing expected fields is absorbed."""
    client = mock_http_client(lambda request: httpx.Response(200, json={"unexpected": True}))
    builder = EvidenceSignalBuilder(client=client)

    _assert_failure(await builder.build_signal(CLAIM, provider))


@pytest.mark.asyncio
async def test_build_signal_request_builder_error(mock_http_client):
    """Test that errors while building the request are absorbed."""
    def broken_builder(claim):
        raise RuntimeError("cannot build")

    provider = ProviderConfig(
        name="test",
        display_name="Test Provider",
        request_builder=broken_builder,
        response_parser=_parse_response,
        weight=0.6,
    )
    client = mock_http_client(lambda request: httpx.Response(200, json={}))
    builder = EvidenceSignalBuilder(client=client)

    _assert_failure(await builder.build_signal(CLAIM, provider))
    assert client.sent_requests == []

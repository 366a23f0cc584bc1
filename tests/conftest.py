"""Test configuration and common fixtures."""

import json
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx
import pytest

from fact_checker.domain.models.evidence import EvidenceSignal, Source, Vote
from fact_checker.infrastructure.providers.exa_adapter import ExaAnswerAdapter, ExaConfig
from fact_checker.infrastructure.providers.perplexity_adapter import PerplexityAdapter, PerplexityConfig


@pytest.fixture
def make_source() -> Callable[..., Source]:
    """Provide a factory for sources."""
    def _make(index: int, name: Optional[str] = None) -> Source:
        return Source(
            name=name or f"Source {index}",
            url=f"https://example.com/article-{index}",
            snippet="",
        )
    return _make


@pytest.fixture
def make_signal() -> Callable[..., EvidenceSignal]:
    """Provide a factory for evidence signals."""
    def _make(
        vote: Vote = Vote.NEUTRAL,
        confidence: float = 0.5,
        provider: str = "test",
        weight: float = 0.5,
        sources: Sequence[Source] = (),
        reasoning: str = "",
        label: Optional[str] = None,
    ) -> EvidenceSignal:
        return EvidenceSignal(
            vote=vote,
            confidence=confidence,
            sources=list(sources),
            reasoning=reasoning,
            provider=provider,
            label=label or provider,
            weight=weight,
        )
    return _make


@pytest.fixture
def exa_payload() -> Dict[str, Any]:
    """Provide a typical Exa answer payload."""
    return {
        "answer": "The claim is accurate. Water boils at 100 degrees Celsius at sea level.",
        "citations": [
            {
                "title": "Boiling point - Wikipedia",
                "url": "https://en.wikipedia.org/wiki/Boiling_point",
                "text": "The boiling point of water is 100 °C at standard pressure.",
            },
            {
                "title": "Why does water boil?",
                "url": "https://www.example.org/water",
            },
            {
                "url": "https://blog.example.net/boiling",
                "text": "An untitled post",
            },
            {
                "title": "Never reached",
                "url": "https://example.com/fourth",
            },
        ],
    }


@pytest.fixture
def perplexity_payload() -> Dict[str, Any]:
    """Provide a typical Perplexity chat completion payload."""
    return {
        "choices": [
            {
                "message": {
                    "content": "1) TRUE 2) Confidence: 0.9 3) Water boils at 100 °C at sea level."
                }
            }
        ],
        "search_results": [
            {"title": "Boiling point - Wikipedia", "url": "https://en.wikipedia.org/wiki/Boiling_point"},
            {"title": "Water", "url": "https://www.usgs.gov/water"},
        ],
    }


@pytest.fixture
def exa_adapter() -> ExaAnswerAdapter:
    """Provide an Exa adapter with a test key."""
    return ExaAnswerAdapter(config=ExaConfig(api_key="exa-test-key", base_url="https://exa.test"))


@pytest.fixture
def perplexity_adapter() -> PerplexityAdapter:
    """Provide a Perplexity adapter with a test key."""
    return PerplexityAdapter(
        config=PerplexityConfig(api_key="pplx-test-key", base_url="https://perplexity.test")
    )


@pytest.fixture
def mock_http_client() -> Callable[..., httpx.AsyncClient]:
    """Provide a factory for HTTP clients answering from a handler.

    The handler receives every request; returned requests are also
    recorded on the client as ``sent_requests``.
    """
    def _make(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
        sent_requests: List[httpx.Request] = []

        async def _handle(request: httpx.Request):
            sent_requests.append(request)
            response = handler(request)
            if hasattr(response, "__await__"):
                response = await response
            return response

        client = httpx.AsyncClient(transport=httpx.MockTransport(_handle))
        client.sent_requests = sent_requests
        return client
    return _make


def request_json(request: httpx.Request) -> Dict[str, Any]:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)


@pytest.fixture
def decode_request() -> Callable[[httpx.Request], Dict[str, Any]]:
    """Provide a decoder for recorded request bodies."""
    return request_json

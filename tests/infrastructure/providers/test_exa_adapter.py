"""Tests for the Exa adapter."""

import pytest

from fact_checker.domain.models.claim import Claim
from fact_checker.domain.models.evidence import Vote
from fact_checker.infrastructure.providers.exa_adapter import ExaAnswerAdapter, ExaConfig


def test_build_request(exa_adapter: ExaAnswerAdapter):
    """Test the answer request."""
    request = exa_adapter.build_request(Claim(text="The sky is green"))

    assert request.method == "POST"
    assert request.url == "https://exa.test/answer"
    assert request.headers["x-api-key"] == "exa-test-key"
    assert request.body == {
        "query": 'Fact-check this statement: "The sky is green"',
        "text": True,
    }


def test_build_probe_request(exa_adapter: ExaAnswerAdapter):
    """Test the credential probe."""
    request = exa_adapter.build_probe_request()

    assert request.url == "https://exa.test/answer"
    assert request.body == {"query": "test query", "text": False}


def test_parse_response(exa_adapter: ExaAnswerAdapter, exa_payload):
    """Test classification with a trusted citation."""
    signal = exa_adapter.parse_response(exa_payload)

    assert signal.vote == Vote.SUPPORT
    assert signal.confidence == 0.9
    assert signal.reasoning == exa_payload["answer"]
    assert len(signal.sources) == 3
    assert signal.sources[0].name == "Boiling point - Wikipedia"
    assert signal.sources[0].snippet.startswith("The boiling point of water")
    assert signal.raw == exa_payload


def test_parse_response_without_citations(exa_adapter: ExaAnswerAdapter):
    """Test an answer with no citations and no keywords."""
    signal = exa_adapter.parse_response({"answer": "Nobody knows."})

    assert signal.vote == Vote.NEUTRAL
    assert signal.confidence == 0.5
    assert signal.sources == []


def test_parse_response_missing_answer(exa_adapter: ExaAnswerAdapter):
    """Test a payload with a null answer."""
    signal = exa_adapter.parse_response({"answer": None, "citations": None})

    assert signal.vote == Vote.NEUTRAL
    assert signal.reasoning == ""


def test_parse_response_keeps_answer_with_odd_citation(exa_adapter: ExaAnswerAdapter):
    """Test that a citation with a numeric title does not discard the answer."""
    payload = {
        "answer": "The claim is accurate.",
        "citations": [{"title": 123, "url": "https://example.com/a", "text": None}],
    }

    signal = exa_adapter.parse_response(payload)

    assert signal.vote == Vote.SUPPORT
    assert signal.reasoning == "The claim is accurate."
    assert signal.sources[0].name == "123"


def test_parse_response_rejects_non_object(exa_adapter: ExaAnswerAdapter):
    """Test that malformed bodies raise for the builder to absorb."""
    with pytest.raises(AttributeError):
        exa_adapter.parse_response(["not", "an", "object"])


def test_raw_payload_not_serialized(exa_adapter: ExaAnswerAdapter, exa_payload):
    """Test that the raw payload stays out of dumps."""
    signal = exa_adapter.parse_response(exa_payload)

    assert "raw" not in signal.model_dump()


def test_provider_properties():
    """Test provider properties."""
    adapter = ExaAnswerAdapter(config=ExaConfig(api_key="key"))

    assert adapter.name == "exa"
    assert adapter.display_name == "Exa Labs"
    assert adapter.weight == 0.4
    assert adapter.is_configured
    assert not ExaAnswerAdapter().is_configured

"""Exa answer implementation of the evidence provider interface."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ...domain.models.claim import Claim
from ...domain.models.evidence import EvidenceSignal
from ...domain.ports.evidence_provider import EvidenceProvider, ProviderRequest
from ...domain.services.source_normalizer import normalize_sources
from ...domain.services.text_classifier import classify_answer


class ExaConfig(BaseModel):
    """Configuration for Exa adapter."""

    api_key: str = Field(default="", description="Exa API key")
    base_url: str = Field(default="https://api.exa.ai", description="API base URL")
    weight: float = Field(default=0.4, gt=0, le=1, description="Aggregation weight")
    include_text: bool = Field(default=True, description="Return citation text with the answer")


class ExaAnswerAdapter(EvidenceProvider):
    """Exa implementation of the evidence provider interface.

    Exa answers a question directly and returns the citations it used,
    so the answer is classified together with its sources.
    """

    def __init__(
        self,
        config: Optional[ExaConfig] = None,
        provider_name: str = "exa",
        display_name: str = "Exa Labs",
    ):
        """Initialize the adapter."""
        self._config = config or ExaConfig()
        self._name = provider_name
        self._display_name = display_name

    def _headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self._config.api_key,
            "Content-Type": "application/json",
        }

    def build_request(self, claim: Claim) -> ProviderRequest:
        """Ask Exa to fact-check the claim."""
        return ProviderRequest(
            url=f"{self._config.base_url}/answer",
            headers=self._headers(),
            body={
                "query": f'Fact-check this statement: "{claim.text}"',
                "text": self._config.include_text,
            },
        )

    def build_probe_request(self) -> ProviderRequest:
        """Build the cheapest request accepted by the answer endpoint."""
        return ProviderRequest(
            url=f"{self._config.base_url}/answer",
            headers=self._headers(),
            body={"query": "test query", "text": False},
        )

    def parse_response(self, payload: Dict[str, Any]) -> EvidenceSignal:
        """Classify Exa's answer and collect its citations."""
        sources = normalize_sources(payload.get("citations"), snippet_key="text")
        answer = payload.get("answer") or ""
        result = classify_answer(answer, sources)

        return EvidenceSignal(
            vote=result.verdict,
            confidence=result.confidence,
            sources=sources,
            reasoning=result.explanation,
            raw=payload,
        )

    @property
    def name(self) -> str:
        """Get the name of the provider."""
        return self._name

    @property
    def display_name(self) -> str:
        """Get the display name of the provider."""
        return self._display_name

    @property
    def weight(self) -> float:
        """Get the aggregation weight."""
        return self._config.weight

    @property
    def is_configured(self) -> bool:
        """Check if an API key is set."""
        return bool(self._config.api_key)

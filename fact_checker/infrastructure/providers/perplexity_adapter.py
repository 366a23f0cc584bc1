"""Perplexity implementation of the evidence provider interface."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ...domain.models.claim import Claim
from ...domain.models.evidence import EvidenceSignal
from ...domain.ports.evidence_provider import EvidenceProvider, ProviderRequest
from ...domain.services.source_normalizer import normalize_sources
from ...domain.services.text_classifier import classify

SYSTEM_PROMPT = (
    "You are a fact-checker. Analyze the given statement for factual accuracy. "
    "Respond with: 1) TRUE/FALSE/UNCERTAIN, 2) Confidence level (0-1), "
    "3) Brief explanation, 4) Key sources if available. Be concise and precise."
)


class PerplexityConfig(BaseModel):
    """Configuration for Perplexity adapter."""

    api_key: str = Field(default="", description="Perplexity API key")
    base_url: str = Field(default="https://api.perplexity.ai", description="API base URL")
    model: str = Field(default="sonar", description="Model to use")
    temperature: float = Field(default=0.1, description="Temperature for responses")
    max_tokens: int = Field(default=200, description="Maximum tokens per response")
    weight: float = Field(default=0.6, gt=0, le=1, description="Aggregation weight")


class PerplexityAdapter(EvidenceProvider):
    """Perplexity implementation of the evidence provider interface."""

    def __init__(
        self,
        config: Optional[PerplexityConfig] = None,
        provider_name: str = "perplexity",
        display_name: str = "Perplexity AI",
    ):
        """Initialize the adapter."""
        self._config = config or PerplexityConfig()
        self._name = provider_name
        self._display_name = display_name

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    def build_request(self, claim: Claim) -> ProviderRequest:
        """Ask the model to fact-check the claim."""
        return ProviderRequest(
            url=f"{self._config.base_url}/chat/completions",
            headers=self._headers(),
            body={
                "model": self._config.model,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": f'Please fact-check this statement: "{claim.text}"'},
                ],
                "max_tokens": self._config.max_tokens,
                "temperature": self._config.temperature,
            },
        )

    def build_probe_request(self) -> ProviderRequest:
        """Build a ten token test completion."""
        return ProviderRequest(
            url=f"{self._config.base_url}/chat/completions",
            headers=self._headers(),
            body={
                "model": self._config.model,
                "messages": [{"role": "user", "content": "Test message"}],
                "max_tokens": 10,
            },
        )

    def parse_response(self, payload: Dict[str, Any]) -> EvidenceSignal:
        """Classify the completion and collect the search results."""
        content = payload["choices"][0]["message"]["content"]
        result = classify(content)
        sources = normalize_sources(payload.get("search_results"))

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

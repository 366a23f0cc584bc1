"""Port interface for evidence providers."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

from pydantic import BaseModel, Field

from ..models.claim import Claim
from ..models.evidence import EvidenceSignal


class ProviderRequest(BaseModel):
    """Outbound HTTP request for one provider."""

    url: str = Field(..., description="Absolute endpoint URL")
    method: str = Field(default="POST", description="HTTP method")
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    body: Optional[Dict[str, Any]] = Field(None, description="JSON body")


class EvidenceProvider(Protocol):
    """Protocol for sources of evidence about a claim.

    A provider only knows how to describe its request and how to read its
    response. Transport, failure handling and aggregation live in the
    domain services, so new providers never require engine changes.
    """

    @property
    def name(self) -> str:
        """Key of the provider in verdict details."""
        ...

    @property
    def display_name(self) -> str:
        """Label of the provider in explanations."""
        ...

    @property
    def weight(self) -> float:
        """Aggregation weight in (0, 1]."""
        ...

    @property
    def is_configured(self) -> bool:
        """Check if the provider has the credentials it needs."""
        ...

    def build_request(self, claim: Claim) -> ProviderRequest:
        """Build the request asking the provider about a claim."""
        ...

    def build_probe_request(self) -> ProviderRequest:
        """Build a minimal request used to check credentials."""
        ...

    def parse_response(self, payload: Any) -> EvidenceSignal:
        """Convert a decoded response body into an evidence signal."""
        ...


@dataclass
class ProviderConfig:
    """Evidence provider assembled from plain callables.

    Satisfies :class:`EvidenceProvider` structurally.
    """

    name: str
    request_builder: Callable[[Claim], ProviderRequest]
    response_parser: Callable[[Any], EvidenceSignal]
    weight: float
    display_name: str = ""
    probe_builder: Optional[Callable[[], ProviderRequest]] = None
    is_configured: bool = True

    def __post_init__(self):
        if not 0 < self.weight <= 1:
            raise ValueError("Provider weight must be in (0, 1]")
        if not self.display_name:
            self.display_name = self.name

    def build_request(self, claim: Claim) -> ProviderRequest:
        return self.request_builder(claim)

    def build_probe_request(self) -> ProviderRequest:
        if self.probe_builder is None:
            return self.request_builder(Claim(text="test query"))
        return self.probe_builder()

    def parse_response(self, payload: Any) -> EvidenceSignal:
        return self.response_parser(payload)

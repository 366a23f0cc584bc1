"""Domain models for per-provider evidence."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


# Failed providers contribute a fixed low-confidence neutral signal
FAILURE_CONFIDENCE = 0.1


class Vote(str, Enum):
    """Discrete stance of one provider towards a claim."""

    SUPPORT = "support"
    CONTRADICT = "contradict"
    NEUTRAL = "neutral"


class Source(BaseModel):
    """A citation backing an evidence signal.

    Sources are identified by their exact URL string.
    """

    name: str = Field(..., description="Display title, equal to the URL when untitled")
    url: str = Field(..., description="URL of the source, used as identity key")
    snippet: Optional[str] = Field(None, description="Relevant excerpt from source")


class EvidenceSignal(BaseModel):
    """Normalized output of one evidence provider."""

    vote: Vote = Field(default=Vote.NEUTRAL, description="Stance towards the claim")
    confidence: float = Field(default=0.5, ge=0.0, le=1.0, description="Confidence (0-1)")
    sources: List[Source] = Field(default_factory=list, description="Supporting citations")
    reasoning: str = Field(default="", description="Free text explanation")
    raw: Optional[Any] = Field(
        default=None,
        exclude=True,
        description="Original provider payload, kept for diagnostics",
    )
    provider: str = Field(default="", description="Name of the provider that produced the signal")
    label: str = Field(default="", description="Display name of the provider")
    weight: float = Field(default=0.0, ge=0.0, le=1.0, description="Aggregation weight")

    @classmethod
    def failure(cls, provider: str, label: str, weight: float) -> "EvidenceSignal":
        """Create the canonical signal for a provider that could not answer."""
        return cls(
            vote=Vote.NEUTRAL,
            confidence=FAILURE_CONFIDENCE,
            sources=[],
            reasoning=f"{label} failed",
            provider=provider,
            label=label,
            weight=weight,
        )

"""Domain models for combined fact-check verdicts."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .evidence import EvidenceSignal, Source


class VerdictStatus(str, Enum):
    """Possible fact-check outcomes."""

    TRUE = "true"
    FALSE = "false"
    UNCERTAIN = "uncertain"
    ERROR = "error"  # The check could not run at all


class ConfidenceRating(str, Enum):
    """Human readable confidence bands."""

    HIGH = "High Confidence"  # >= 0.7
    MEDIUM = "Medium Confidence"  # >= 0.5
    LOW = "Low Confidence"


def rating_for(confidence: float) -> ConfidenceRating:
    """Map a confidence score onto its rating band."""
    if confidence >= 0.7:
        return ConfidenceRating.HIGH
    elif confidence >= 0.5:
        return ConfidenceRating.MEDIUM
    return ConfidenceRating.LOW


class CombinedVerdict(BaseModel):
    """Final aggregated result of a fact-check."""

    status: VerdictStatus = Field(..., description="Verdict status")
    title: str = Field(..., description="Short verdict label")
    description: str = Field(..., description="One line summary of the verdict")
    explanation: str = Field(..., description="Reasoning of every provider, in declaration order")
    sources: List[Source] = Field(default_factory=list, description="Deduplicated citations")
    rating: Optional[ConfidenceRating] = Field(None, description="Confidence band")
    confidence: Optional[float] = Field(None, description="Weighted confidence (0-1)")
    details: Dict[str, EvidenceSignal] = Field(
        default_factory=dict,
        description="Signal of every provider, keyed by provider name",
    )

    @classmethod
    def error(cls, title: str, description: str, explanation: str) -> "CombinedVerdict":
        """Create a structured error result."""
        return cls(
            status=VerdictStatus.ERROR,
            title=title,
            description=description,
            explanation=explanation,
            sources=[],
        )

    @property
    def is_error(self) -> bool:
        """Check if the verdict is an error result."""
        return self.status == VerdictStatus.ERROR

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "example": {
                "status": "true",
                "title": "Likely True",
                "description": "Both sources support this claim",
                "explanation": "Exa Labs: The claim is accurate. Perplexity AI: TRUE. Confidence: 0.9",
                "sources": [
                    {"name": "Water - Wikipedia", "url": "https://en.wikipedia.org/wiki/Water", "snippet": ""}
                ],
                "rating": "High Confidence",
                "confidence": 0.9,
                "details": {},
            }
        }


class CredentialCheckResult(BaseModel):
    """Result of probing the providers' credentials."""

    success: bool
    error: Optional[str] = None

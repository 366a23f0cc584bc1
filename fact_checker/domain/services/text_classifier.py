"""Lexical classification of provider answers into votes.

Both classifiers are pure functions over lower-cased text. Rules are
evaluated in order and the first match wins; later rules are fallbacks,
not independent votes.
"""

import re
from typing import Callable, Iterable, Optional, Sequence, Tuple

from pydantic import BaseModel

from ..models.evidence import Source, Vote

DEFAULT_CONFIDENCE = 0.5
RELIABILITY_BOOST = 0.2

# Domains whose presence in a citation URL marks the evidence as reliable
TRUSTED_DOMAINS: Tuple[str, ...] = (
    "wikipedia.org",
    "britannica.com",
    "edu",
    "gov",
    "nature.com",
    "science.org",
    "reuters.com",
    "bbc.com",
)

_CONFIDENCE_PATTERN = re.compile(r"(?:confidence|certainty).*?(\d+(?:\.\d+)?)", re.IGNORECASE)

# (vote, predicate) for chat-completion style answers
_VERDICT_RULES: Tuple[Tuple[Vote, Callable[[str], bool]], ...] = (
    (Vote.SUPPORT, lambda text: "true" in text and "false" not in text),
    (Vote.CONTRADICT, lambda text: "false" in text and "true" not in text),
    (Vote.NEUTRAL, lambda text: "uncertain" in text or "unclear" in text),
)

# (vote, confidence, keywords) for answer-with-citations style answers
_ANSWER_RULES: Tuple[Tuple[Vote, float, Tuple[str, ...]], ...] = (
    (Vote.SUPPORT, 0.7, ("true", "correct", "accurate")),
    (Vote.CONTRADICT, 0.7, ("false", "incorrect", "wrong")),
    (Vote.NEUTRAL, 0.4, ("uncertain", "unclear", "mixed")),
)


class Classification(BaseModel):
    """Verdict extracted from one provider's text."""

    verdict: Vote = Vote.NEUTRAL
    confidence: float = DEFAULT_CONFIDENCE
    explanation: str = ""


def extract_confidence(text: str) -> Optional[float]:
    """Find a stated confidence such as "Confidence: 0.8" or "certainty 85%".

    Values up to 1 are taken as-is, values up to 100 as percentages.
    Anything larger is ignored.
    """
    match = _CONFIDENCE_PATTERN.search(text)
    if not match:
        return None

    value = float(match.group(1))
    if value <= 1:
        return value
    elif value <= 100:
        return value / 100
    return None


def classify(text: Optional[str]) -> Classification:
    """Classify a free-text fact-check answer.

    Args:
        text: Raw answer of the provider

    Returns:
        Verdict, confidence and the text itself as explanation
    """
    text = text or ""
    lowered = text.lower()

    verdict = Vote.NEUTRAL
    for vote, matches in _VERDICT_RULES:
        if matches(lowered):
            verdict = vote
            break

    confidence = extract_confidence(text)
    return Classification(
        verdict=verdict,
        confidence=DEFAULT_CONFIDENCE if confidence is None else confidence,
        explanation=text,
    )


def has_trusted_source(sources: Iterable[Source], trusted_domains: Sequence[str] = TRUSTED_DOMAINS) -> bool:
    """Check if any source URL mentions a trusted domain."""
    return any(domain in source.url for source in sources for domain in trusted_domains)


def apply_reliability_boost(
    confidence: float,
    sources: Iterable[Source],
    trusted_domains: Sequence[str] = TRUSTED_DOMAINS,
) -> float:
    """Raise confidence when the evidence cites a trusted domain, capped at 1.0."""
    if not has_trusted_source(sources, trusted_domains):
        return confidence
    # Rounded so 0.7 + 0.2 reads as 0.9
    return round(min(confidence + RELIABILITY_BOOST, 1.0), 6)


def classify_answer(
    text: Optional[str],
    sources: Sequence[Source] = (),
    trusted_domains: Sequence[str] = TRUSTED_DOMAINS,
) -> Classification:
    """Classify an answer that comes paired with its citations.

    Uses a fixed keyword set per vote, then boosts confidence when one
    of the citations comes from a trusted domain.
    """
    text = text or ""
    lowered = text.lower()

    verdict, confidence = Vote.NEUTRAL, DEFAULT_CONFIDENCE
    for vote, rule_confidence, keywords in _ANSWER_RULES:
        if any(keyword in lowered for keyword in keywords):
            verdict, confidence = vote, rule_confidence
            break

    return Classification(
        verdict=verdict,
        confidence=apply_reliability_boost(confidence, sources, trusted_domains),
        explanation=text,
    )

"""Combines evidence signals into a single verdict."""

import logging
from typing import Callable, List, Sequence, Tuple, Union

from ..models.claim import Claim
from ..models.evidence import EvidenceSignal, Vote
from ..models.verdict import CombinedVerdict, VerdictStatus, rating_for
from .source_normalizer import MAX_COMBINED_SOURCES, merge_sources

logger = logging.getLogger(__name__)

StanceRule = Tuple[Callable[[List[Vote]], bool], VerdictStatus, str, Union[str, Callable[[List[Vote]], str]]]


def _all_support_description(votes: List[Vote]) -> str:
    if len(votes) == 2:
        return "Both sources support this claim"
    return "All sources support this claim"


# Evaluated in order, first match wins. A single contradiction outweighs
# any amount of support.
STANCE_RULES: Tuple[StanceRule, ...] = (
    (
        lambda votes: bool(votes) and all(vote == Vote.SUPPORT for vote in votes),
        VerdictStatus.TRUE,
        "Likely True",
        _all_support_description,
    ),
    (
        lambda votes: Vote.CONTRADICT in votes,
        VerdictStatus.FALSE,
        "Likely False",
        "Evidence contradicts this claim",
    ),
    (
        lambda votes: Vote.SUPPORT in votes,
        VerdictStatus.TRUE,
        "Possibly True",
        "Some evidence supports this claim",
    ),
)

UNCERTAIN_STANCE = (VerdictStatus.UNCERTAIN, "Uncertain", "Mixed or insufficient evidence")


def resolve_stance(votes: List[Vote]) -> Tuple[VerdictStatus, str, str]:
    """Resolve provider votes into (status, title, description)."""
    for matches, status, title, description in STANCE_RULES:
        if matches(votes):
            if callable(description):
                description = description(votes)
            return status, title, description
    return UNCERTAIN_STANCE


def weighted_confidence(signals: Sequence[EvidenceSignal]) -> float:
    """Sum of every signal's confidence times its weight."""
    return sum(signal.confidence * signal.weight for signal in signals)


def combine(claim: Claim, signals: Sequence[EvidenceSignal]) -> CombinedVerdict:
    """Combine provider signals into a verdict.

    Args:
        claim: The checked claim
        signals: One signal per provider, in provider declaration order

    Returns:
        Combined verdict
    """
    status, title, description = resolve_stance([signal.vote for signal in signals])
    confidence = weighted_confidence(signals)

    explanation = ". ".join(
        f"{signal.label or signal.provider}: {signal.reasoning}" for signal in signals
    )

    verdict = CombinedVerdict(
        status=status,
        title=title,
        description=description,
        explanation=explanation,
        sources=merge_sources((signal.sources for signal in signals), limit=MAX_COMBINED_SOURCES),
        rating=rating_for(confidence),
        confidence=confidence,
        details={signal.provider: signal for signal in signals},
    )

    logger.info(
        f"⚖️ Verdict for '{claim.text[:50]}': {verdict.title} "
        f"({verdict.rating.value}, confidence={confidence:.2f})"
    )
    return verdict

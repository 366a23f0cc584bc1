"""Service for coordinating fact checking across evidence providers."""

import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from ..errors import (
    EmptyClaimError,
    FactCheckPreconditionError,
    MissingCredentialsError,
    NoProvidersError,
)
from ..models.claim import Claim
from ..models.verdict import CombinedVerdict, CredentialCheckResult
from ..ports.evidence_provider import EvidenceProvider
from .aggregator import combine
from .signal_builder import DEFAULT_TIMEOUT, EvidenceSignalBuilder

logger = logging.getLogger(__name__)


def validate_request(claim_text: Optional[str], providers: Sequence[EvidenceProvider]) -> Claim:
    """Check the caller's input before any provider is contacted.

    Raises:
        EmptyClaimError: If the claim is empty after trimming
        NoProvidersError: If no providers are given
        MissingCredentialsError: If a provider lacks its API key
    """
    claim = Claim(text=claim_text or "")
    if claim.is_empty:
        raise EmptyClaimError()
    if not providers:
        raise NoProvidersError()

    unconfigured = [provider.display_name for provider in providers if not provider.is_configured]
    if unconfigured:
        raise MissingCredentialsError(unconfigured)
    return claim


async def fact_check(
    claim_text: str,
    providers: Sequence[EvidenceProvider],
    builder: Optional[EvidenceSignalBuilder] = None,
) -> CombinedVerdict:
    """Fact-check a claim against every provider concurrently.

    All provider calls are awaited together; provider failures are already
    absorbed into fallback signals, so the join never short-circuits.

    Raises:
        FactCheckPreconditionError: If the input cannot be checked
    """
    claim = validate_request(claim_text, providers)
    builder = builder or EvidenceSignalBuilder()

    logger.info(f"🔍 Fact-checking with {len(providers)} providers: {claim.text[:100]}")
    signals = await asyncio.gather(
        *(builder.build_signal(claim, provider) for provider in providers)
    )
    return combine(claim, list(signals))


class FactCheckingService:
    """Service for coordinating fact checking.

    Exposes the engine to callers: every call returns a verdict, with
    caller mistakes reported as structured error verdicts.
    """

    def __init__(
        self,
        providers: Optional[Sequence[EvidenceProvider]] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the service.

        Args:
            providers: Default providers, used when a call does not pass its own
            timeout: Per-provider request timeout in seconds
        """
        self._providers: List[EvidenceProvider] = list(providers or [])
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        logger.info("🔧 FactCheckingService initialized")

    @property
    def providers(self) -> List[EvidenceProvider]:
        """Default providers of the service."""
        return list(self._providers)

    async def initialize(self) -> None:
        """Open the shared HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)

    async def shutdown(self) -> None:
        """Close the shared HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _builder(self) -> EvidenceSignalBuilder:
        return EvidenceSignalBuilder(client=self._client, timeout=self._timeout)

    async def fact_check(
        self,
        claim_text: str,
        providers: Optional[Sequence[EvidenceProvider]] = None,
    ) -> CombinedVerdict:
        """Fact check a claim, raising on invalid input.

        Args:
            claim_text: Claim to check
            providers: Providers to ask, defaults to the service's providers

        Returns:
            Combined verdict
        """
        if providers is None:
            providers = self._providers
        return await fact_check(claim_text, providers, self._builder())

    async def run(
        self,
        claim_text: str,
        providers: Optional[Sequence[EvidenceProvider]] = None,
    ) -> CombinedVerdict:
        """Fact check a claim, reporting every problem as an error verdict."""
        try:
            return await self.fact_check(claim_text, providers)
        except FactCheckPreconditionError as e:
            logger.warning(f"⚠️ Cannot fact-check: {e}")
            return CombinedVerdict.error(
                title=e.title,
                description=e.description,
                explanation=str(e),
            )
        except Exception as e:
            logger.error(f"❌ Fact check failed: {e}", exc_info=True)
            return CombinedVerdict.error(
                title="Error",
                description="An error occurred during fact-checking.",
                explanation=str(e),
            )

    async def test_credentials(
        self,
        providers: Optional[Sequence[EvidenceProvider]] = None,
    ) -> CredentialCheckResult:
        """Probe every provider with a minimal request.

        Providers are probed one after another and the first failure is
        reported.
        """
        if providers is None:
            providers = self._providers
        if not providers:
            return CredentialCheckResult(success=False, error=str(NoProvidersError()))

        builder = self._builder()
        try:
            for provider in providers:
                logger.info(f"🔑 Testing {provider.display_name} credentials...")
                response = await builder.send(provider.build_probe_request())
                if not response.is_success:
                    logger.warning(f"⚠️ {provider.display_name} rejected the credentials: {response.status_code}")
                    return CredentialCheckResult(
                        success=False,
                        error=f"{provider.display_name} API test failed",
                    )
        except Exception as e:
            logger.error(f"❌ API key test error: {e}")
            return CredentialCheckResult(success=False, error=str(e))

        logger.info("✅ All credentials accepted")
        return CredentialCheckResult(success=True)

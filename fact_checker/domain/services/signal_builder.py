"""Builds one evidence signal per provider, isolating provider failures."""

import asyncio
import logging
from typing import Optional

import httpx

from ..models.claim import Claim
from ..models.evidence import EvidenceSignal
from ..ports.evidence_provider import EvidenceProvider, ProviderRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class EvidenceSignalBuilder:
    """Turns a provider call into an :class:`EvidenceSignal`.

    A failing provider never raises out of :meth:`build_signal`; it is
    degraded to the canonical low-confidence neutral signal so the other
    providers' evidence is still aggregated.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the builder.

        Args:
            client: Shared HTTP client. When omitted a client is opened per request.
            timeout: Overall time limit for one provider call, in seconds
        """
        self._client = client
        self._timeout = timeout

    async def send(self, request: ProviderRequest) -> httpx.Response:
        """Send a provider request and return the raw response."""
        if self._client is not None:
            return await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
                timeout=self._timeout,
            )

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.request(
                request.method,
                request.url,
                headers=request.headers,
                json=request.body,
            )

    async def build_signal(self, claim: Claim, provider: EvidenceProvider) -> EvidenceSignal:
        """Ask one provider about a claim.

        Args:
            claim: Claim to check
            provider: Provider to ask

        Returns:
            The provider's signal, or the failure signal on any error
        """
        logger.info(f"📡 Querying {provider.display_name}...")

        try:
            request = provider.build_request(claim)
            # httpx limits each network phase; this bounds the whole exchange.
            response = await asyncio.wait_for(self.send(request), self._timeout)
            response.raise_for_status()
            payload = response.json()
            logger.debug(f"📦 {provider.display_name} payload: {payload}")
            signal = provider.parse_response(payload)
        except Exception as e:
            logger.warning(f"⚠️ {provider.display_name} failed: {type(e).__name__}: {e}")
            return EvidenceSignal.failure(provider.name, provider.display_name, provider.weight)

        logger.info(
            f"✅ {provider.display_name} voted {signal.vote.value} "
            f"(confidence={signal.confidence:.2f}, sources={len(signal.sources)})"
        )
        return signal.model_copy(
            update={
                "provider": provider.name,
                "label": provider.display_name,
                "weight": provider.weight,
            }
        )

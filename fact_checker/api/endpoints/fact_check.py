"""Fact-checking API endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...domain.models.verdict import CombinedVerdict, CredentialCheckResult
from ...domain.services.fact_checking_service import FactCheckingService
from ...infrastructure.dependencies import get_fact_checking_service, get_provider_factory
from ...infrastructure.providers.factory import EvidenceProviderFactory

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["fact-check"])


class Credentials(BaseModel):
    """Provider API keys supplied by the caller.

    Missing keys fall back to the server's environment.
    """

    exa_api_key: Optional[str] = Field(None, description="Exa API key")
    perplexity_api_key: Optional[str] = Field(None, description="Perplexity API key")

    def as_overrides(self):
        return {"exa": self.exa_api_key, "perplexity": self.perplexity_api_key}


class FactCheckRequest(Credentials):
    """Request model for claim fact-checking."""

    text: str = Field(..., description="Claim to fact-check")


class FactCheckResponse(BaseModel):
    """Response model for claim fact-checking."""

    success: bool = Field(..., description="Whether a verdict could be reached")
    result: CombinedVerdict = Field(..., description="Verdict or structured error")


@router.post("/fact-check", response_model=FactCheckResponse)
async def check_claim(
    request: FactCheckRequest,
    service: FactCheckingService = Depends(get_fact_checking_service),
    factory: EvidenceProviderFactory = Depends(get_provider_factory),
) -> FactCheckResponse:
    """Fact-check a claim against every evidence provider.

    Args:
        request: Fact-check request

    Returns:
        Combined verdict, or an error verdict when the check could not run
    """
    logger.info(f"Starting fact-check for text: {request.text[:100]}...")
    providers = factory.default_providers(request.as_overrides())
    verdict = await service.run(request.text, providers)
    return FactCheckResponse(success=not verdict.is_error, result=verdict)


@router.post("/credentials/test", response_model=CredentialCheckResult)
async def test_credentials(
    request: Credentials,
    service: FactCheckingService = Depends(get_fact_checking_service),
    factory: EvidenceProviderFactory = Depends(get_provider_factory),
) -> CredentialCheckResult:
    """Check that every provider accepts its API key."""
    providers = factory.default_providers(request.as_overrides())
    return await service.test_credentials(providers)

"""Health check endpoints."""

from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...infrastructure.dependencies import get_provider_factory
from ...infrastructure.providers.factory import EvidenceProviderFactory

VERSION = "0.1.0"

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    providers: Dict[str, bool]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    factory: EvidenceProviderFactory = Depends(get_provider_factory),
) -> HealthResponse:
    """Check service health and which providers have credentials."""
    return HealthResponse(
        status="healthy",
        version=VERSION,
        providers=factory.available_providers,
    )

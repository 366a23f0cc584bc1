"""Dependency injection configuration for hexagonal architecture."""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..domain.services.fact_checking_service import FactCheckingService
from .config import EngineConfig
from .providers.factory import EvidenceProviderFactory

logger = logging.getLogger(__name__)

# Load environment variables from .env file if it exists
if load_dotenv():
    logger.info("📁 Environment variables loaded from .env file via python-dotenv")


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize service container."""
        self._config = config or EngineConfig.from_env()
        self._services: Dict[str, Any] = {}
        self._setup_services()

    def _setup_services(self):
        """Setup all services and their dependencies."""
        logger.info("🔧 Setting up service container...")

        provider_factory = EvidenceProviderFactory(self._config)
        fact_checking_service = FactCheckingService(
            providers=provider_factory.default_providers(),
            timeout=self._config.timeout,
        )

        self._services = {
            "provider_factory": provider_factory,
            "fact_checking_service": fact_checking_service,
        }

        logger.info("✅ Service container setup completed")

    def get(self, service_name: str) -> Any:
        """Get a service by name.

        Args:
            service_name: Name of the service

        Returns:
            Service instance

        Raises:
            KeyError: If service not found
        """
        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found")
        return self._services[service_name]

    def get_provider_factory(self) -> EvidenceProviderFactory:
        """Get the evidence provider factory."""
        return self.get("provider_factory")

    def get_fact_checking_service(self) -> FactCheckingService:
        """Get fact checking service."""
        return self.get("fact_checking_service")

    async def shutdown(self) -> None:
        """Release resources held by the services."""
        await self.get_fact_checking_service().shutdown()


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance.

    Returns:
        Service container instance
    """
    return ServiceContainer()


# Convenience functions for FastAPI dependency injection
def get_provider_factory() -> EvidenceProviderFactory:
    """FastAPI dependency for the evidence provider factory."""
    return get_service_container().get_provider_factory()


def get_fact_checking_service() -> FactCheckingService:
    """FastAPI dependency for fact checking service."""
    return get_service_container().get_fact_checking_service()

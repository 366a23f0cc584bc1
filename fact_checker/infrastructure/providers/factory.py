"""Factory for creating evidence providers."""

import logging
from typing import Callable, Dict, List, Optional

from ...domain.ports.evidence_provider import EvidenceProvider
from ..config import EngineConfig
from .exa_adapter import ExaAnswerAdapter, ExaConfig
from .perplexity_adapter import PerplexityAdapter, PerplexityConfig

logger = logging.getLogger(__name__)

ProviderBuilder = Callable[[str], EvidenceProvider]


def _build_exa(api_key: str) -> EvidenceProvider:
    return ExaAnswerAdapter(config=ExaConfig(api_key=api_key))


def _build_perplexity(api_key: str) -> EvidenceProvider:
    return PerplexityAdapter(config=PerplexityConfig(api_key=api_key))


class EvidenceProviderFactory:
    """Factory for creating evidence providers.

    Providers are registered by name, in the order they are declared to
    the aggregator. The reference policy is Exa first, Perplexity second.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize the factory."""
        self._config = config or EngineConfig()
        self._builders: Dict[str, ProviderBuilder] = {}

        # Register default providers
        self.register_provider("exa", _build_exa)
        self.register_provider("perplexity", _build_perplexity)

    def register_provider(self, name: str, builder: ProviderBuilder) -> None:
        """Register a new provider.

        Args:
            name: Unique provider name
            builder: Callable creating the provider from an API key

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._builders:
            raise ValueError(f"Provider {name} already registered")
        self._builders[name] = builder

    def _default_api_key(self, name: str) -> str:
        return {
            "exa": self._config.exa_api_key,
            "perplexity": self._config.perplexity_api_key,
        }.get(name, "")

    def create_provider(self, name: str, api_key: Optional[str] = None) -> EvidenceProvider:
        """Create a provider instance.

        Args:
            name: Provider name
            api_key: API key, defaults to the configured one

        Returns:
            Provider instance

        Raises:
            ValueError: If provider not found
        """
        if name not in self._builders:
            raise ValueError(f"Provider '{name}' not found")
        return self._builders[name](api_key or self._default_api_key(name))

    def default_providers(self, api_keys: Optional[Dict[str, Optional[str]]] = None) -> List[EvidenceProvider]:
        """Create every registered provider in declaration order.

        Args:
            api_keys: Per-provider API keys overriding the configured ones
        """
        api_keys = api_keys or {}
        providers = [self.create_provider(name, api_keys.get(name)) for name in self._builders]
        logger.debug(f"🔨 Created providers: {[provider.name for provider in providers]}")
        return providers

    @property
    def available_providers(self) -> Dict[str, bool]:
        """Get dictionary of registered providers and whether they have credentials."""
        return {
            name: self.create_provider(name).is_configured
            for name in self._builders
        }

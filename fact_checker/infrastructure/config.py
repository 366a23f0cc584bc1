"""Engine configuration management."""

import logging
import os

from pydantic import BaseModel, Field

from ..domain.services.signal_builder import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def _timeout_from_env() -> float:
    raw = os.getenv("FACT_CHECK_TIMEOUT")
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not timeout > 0:
        logger.warning(f"⚠️ Invalid FACT_CHECK_TIMEOUT {raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


class EngineConfig(BaseModel):
    """Configuration shared by the fact-checking engine."""

    exa_api_key: str = Field(default="", description="Exa API key")
    perplexity_api_key: str = Field(default="", description="Perplexity API key")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Per-provider timeout in seconds")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create configuration from environment variables."""
        exa_api_key = os.getenv("EXA_API_KEY", "")
        perplexity_api_key = os.getenv("PERPLEXITY_API_KEY", "")
        timeout = _timeout_from_env()

        if not exa_api_key:
            logger.warning("⚠️ EXA_API_KEY not found in environment variables")
        else:
            logger.info(f"✅ Exa API key loaded: {len(exa_api_key)} chars")

        if not perplexity_api_key:
            logger.warning("⚠️ PERPLEXITY_API_KEY not found in environment variables")
        else:
            logger.info(f"✅ Perplexity API key loaded: {len(perplexity_api_key)} chars")

        return cls(
            exa_api_key=exa_api_key,
            perplexity_api_key=perplexity_api_key,
            timeout=timeout,
        )

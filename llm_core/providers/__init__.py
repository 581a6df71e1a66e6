"""
LLM Provider - Factory module for content generation providers.

Selects the appropriate LLM implementation based on configuration.

Directory Structure:
    providers/
    ├── __init__.py        # This file - factory selecting a provider
    ├── interface.py       # Abstract interface all LLMs must implement
    ├── gemini_impl.py     # Gemini API / Vertex AI implementation
    └── local_impl.py      # Mocked local implementation
"""
from __future__ import annotations

from enum import Enum

from google import genai
from google.genai import types

from ..config import Settings, get_logger, get_settings
from ..exceptions import UnsupportedProviderError
from ..utils import build_user_agent
from .gemini_impl import GoogleGeminiProvider
from .interface import LLMProviderInterface, UserTierId
from .local_impl import LocalLLMProvider

logger = get_logger("llm.provider")


class ProviderKind(str, Enum):
    """Closed set of provider backends the factory can build."""

    REMOTE = "remote"
    LOCAL = "local"

    @classmethod
    def _missing_(cls, value: object) -> "ProviderKind | None":
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "google":  # legacy selector
                return cls.REMOTE
            for member in cls:
                if member.value == normalized:
                    return member
        return None


def _create_gemini_provider(config: Settings) -> GoogleGeminiProvider:
    """Build the genai client and wrap its async models API."""
    generator_config = config.get_content_generator_config()
    http_options = types.HttpOptions(
        headers={"User-Agent": build_user_agent(config.CLI_VERSION)},
    )
    client = genai.Client(
        # Empty key means "not provided": the SDK then resolves credentials itself
        api_key=generator_config.api_key or None,
        vertexai=generator_config.vertexai,
        http_options=http_options,
    )
    logger.info("LLM Provider: Gemini (vertexai: %s)", generator_config.vertexai)
    return GoogleGeminiProvider(client.aio.models)


def create_llm_provider(config: Settings | None = None) -> LLMProviderInterface:
    """
    Create the provider selected by ``LLM_PROVIDER``.

    Args:
        config: Resolved settings (defaults to the cached settings)

    Returns:
        A new provider instance owned by the caller

    Raises:
        UnsupportedProviderError: If the provider kind is not recognized
    """
    if config is None:
        config = get_settings()

    try:
        kind = ProviderKind(config.LLM_PROVIDER)
    except ValueError:
        raise UnsupportedProviderError(
            config.LLM_PROVIDER, supported=[k.value for k in ProviderKind]
        ) from None

    if kind is ProviderKind.REMOTE:
        return _create_gemini_provider(config)

    logger.info("LLM Provider: Local (mocked)")
    return LocalLLMProvider()


__all__ = [
    "GoogleGeminiProvider",
    "LLMProviderInterface",
    "LocalLLMProvider",
    "ProviderKind",
    "UserTierId",
    "create_llm_provider",
]

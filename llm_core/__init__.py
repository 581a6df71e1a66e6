"""
LLM core - provider selection layer for the command-line client.

Usage:
    from llm_core import create_llm_provider

    provider = create_llm_provider()
    response = await provider.generate_content(request, user_prompt_id)
"""

from .exceptions import ConfigurationError, LLMCoreException, UnsupportedProviderError
from .models import CountTokensRequest, EmbedContentRequest, GenerateContentRequest
from .providers import (
    GoogleGeminiProvider,
    LLMProviderInterface,
    LocalLLMProvider,
    ProviderKind,
    UserTierId,
    create_llm_provider,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CountTokensRequest",
    "EmbedContentRequest",
    "GenerateContentRequest",
    "GoogleGeminiProvider",
    "LLMCoreException",
    "LLMProviderInterface",
    "LocalLLMProvider",
    "ProviderKind",
    "UnsupportedProviderError",
    "UserTierId",
    "create_llm_provider",
]

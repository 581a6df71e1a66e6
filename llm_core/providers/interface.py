"""
Abstract interface for LLM providers.

All LLM providers must implement this interface so that the remote Gemini
backend and the mocked local backend can be used interchangeably.

Requests are llm_core.models payloads and responses are the google-genai
SDK's own types. Both are passed through without interpretation.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import AsyncIterator, Optional

from google.genai import types

from ..models import CountTokensRequest, EmbedContentRequest, GenerateContentRequest


class UserTierId(str, Enum):
    """Account tier a provider may report for its user."""

    FREE = "free-tier"
    LEGACY = "legacy-tier"
    STANDARD = "standard-tier"


class LLMProviderInterface(ABC):
    """
    Abstract interface for LLM providers.

    All implementations must provide:
    - Single-shot and streaming content generation
    - Token counting
    - Embedding generation

    ``user_prompt_id`` is an opaque correlation id supplied by the caller.
    Every implementation accepts it; none currently use it.
    """

    @property
    def user_tier(self) -> Optional[UserTierId]:
        """Account tier of the user, read-only; None when unknown."""
        return None

    @abstractmethod
    async def generate_content(
        self,
        request: GenerateContentRequest,
        user_prompt_id: str,
    ) -> types.GenerateContentResponse:
        """
        Generate a single, complete response.

        Args:
            request: Model id, conversation contents and generation config
            user_prompt_id: Caller-supplied correlation id

        Returns:
            GenerateContentResponse: The model's response
        """
        pass

    @abstractmethod
    async def generate_content_stream(
        self,
        request: GenerateContentRequest,
        user_prompt_id: str,
    ) -> AsyncIterator[types.GenerateContentResponse]:
        """
        Start a streaming generation.

        Awaiting this returns a fresh async iterator. It is finite and
        cannot be restarted; call again for a new stream.

        Args:
            request: Model id, conversation contents and generation config
            user_prompt_id: Caller-supplied correlation id

        Returns:
            AsyncIterator yielding partial-to-final responses
        """
        pass

    @abstractmethod
    async def count_tokens(
        self,
        request: CountTokensRequest,
    ) -> types.CountTokensResponse:
        """Count the tokens in a payload."""
        pass

    @abstractmethod
    async def embed_content(
        self,
        request: EmbedContentRequest,
    ) -> types.EmbedContentResponse:
        """Generate embedding vectors for the given contents."""
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Get the provider name (e.g., 'gemini', 'local')."""
        pass

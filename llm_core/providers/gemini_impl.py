"""
Gemini LLM Provider implementation.

Thin wrapper around the async ``Models`` object of Google's genai SDK.
Requests and responses pass through unchanged and SDK errors reach the
caller as raised.
"""
from __future__ import annotations

from typing import AsyncIterator

from google.genai import types
from google.genai.models import AsyncModels

from ..config import get_logger
from ..models import CountTokensRequest, EmbedContentRequest, GenerateContentRequest
from .interface import LLMProviderInterface

logger = get_logger("llm.gemini")


class GoogleGeminiProvider(LLMProviderInterface):
    """
    Gemini provider forwarding every call to an injected ``AsyncModels``.

    The client is built by the provider factory; this class only holds
    the reference.
    """

    def __init__(self, models: AsyncModels):
        self._models = models
        logger.debug("Gemini provider bound to %s", type(models).__name__)

    async def generate_content(
        self,
        request: GenerateContentRequest,
        user_prompt_id: str,
    ) -> types.GenerateContentResponse:
        return await self._models.generate_content(
            model=request.model,
            contents=request.contents,
            config=request.config,
        )

    async def generate_content_stream(
        self,
        request: GenerateContentRequest,
        user_prompt_id: str,
    ) -> AsyncIterator[types.GenerateContentResponse]:
        return await self._models.generate_content_stream(
            model=request.model,
            contents=request.contents,
            config=request.config,
        )

    async def count_tokens(
        self,
        request: CountTokensRequest,
    ) -> types.CountTokensResponse:
        return await self._models.count_tokens(
            model=request.model,
            contents=request.contents,
            config=request.config,
        )

    async def embed_content(
        self,
        request: EmbedContentRequest,
    ) -> types.EmbedContentResponse:
        return await self._models.embed_content(
            model=request.model,
            contents=request.contents,
            config=request.config,
        )

    def get_provider_name(self) -> str:
        """Get the provider name."""
        return "gemini"

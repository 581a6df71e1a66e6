"""
Mocked local LLM Provider.

Simulates a local LLM server without any I/O. Every operation ignores its
input and returns fixed payloads, which makes it useful for exercising the
provider-switching path in isolation.
"""
from __future__ import annotations

from typing import AsyncIterator

from google.genai import types

from ..models import CountTokensRequest, EmbedContentRequest, GenerateContentRequest
from .interface import LLMProviderInterface

MOCK_RESPONSE_TEXT = "This is a mocked response from the local LLM."
MOCK_EMBEDDING = [0.1, 0.2, 0.3]


class LocalLLMProvider(LLMProviderInterface):
    """
    Mocked provider returning hardcoded responses.

    Nothing is stored on the instance, so repeated calls always produce
    equal results.
    """

    async def generate_content(
        self,
        request: GenerateContentRequest,
        user_prompt_id: str,
    ) -> types.GenerateContentResponse:
        """Return the canned response regardless of the request."""
        return types.GenerateContentResponse(
            candidates=[
                types.Candidate(
                    index=0,
                    content=types.Content(
                        role="model",
                        parts=[types.Part(text=MOCK_RESPONSE_TEXT)],
                    ),
                    finish_reason=types.FinishReason.STOP,
                    safety_ratings=[],
                )
            ],
            usage_metadata=types.GenerateContentResponseUsageMetadata(
                prompt_token_count=10,
                candidates_token_count=5,
                total_token_count=15,
            ),
        )

    async def generate_content_stream(
        self,
        request: GenerateContentRequest,
        user_prompt_id: str,
    ) -> AsyncIterator[types.GenerateContentResponse]:
        """Return a stream holding the canned response as its only chunk."""

        async def _stream() -> AsyncIterator[types.GenerateContentResponse]:
            yield await self.generate_content(request, user_prompt_id)

        return _stream()

    async def count_tokens(
        self,
        request: CountTokensRequest,
    ) -> types.CountTokensResponse:
        return types.CountTokensResponse(total_tokens=10)

    async def embed_content(
        self,
        request: EmbedContentRequest,
    ) -> types.EmbedContentResponse:
        return types.EmbedContentResponse(
            embeddings=[types.ContentEmbedding(values=list(MOCK_EMBEDDING))]
        )

    def get_provider_name(self) -> str:
        """Get the provider name."""
        return "local"

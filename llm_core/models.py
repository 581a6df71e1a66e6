"""
Pydantic request models handed to LLM providers.

Each request carries the three values the genai SDK takes as keyword
arguments (``model``, ``contents``, ``config``). ``contents`` is opaque and
kept exactly as given; providers forward it without interpretation.

Usage:
    from llm_core.models import GenerateContentRequest

    request = GenerateContentRequest(model="gemini-2.0-flash", contents="hi")
"""
from __future__ import annotations

from typing import Any, Optional

from google.genai import types
from pydantic import BaseModel, ConfigDict, Field


class _ProviderRequest(BaseModel):
    """Shared shape of every provider request."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(description="Model identifier, e.g. 'gemini-2.0-flash'")
    contents: Any = Field(description="Conversation turns or text, in any form the SDK accepts")


class GenerateContentRequest(_ProviderRequest):
    """Request for single-shot and streaming generation."""

    config: Optional[types.GenerateContentConfig] = None


class CountTokensRequest(_ProviderRequest):
    """Request for a token count."""

    config: Optional[types.CountTokensConfig] = None


class EmbedContentRequest(_ProviderRequest):
    """Request for embedding vectors."""

    config: Optional[types.EmbedContentConfig] = None

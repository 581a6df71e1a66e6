"""
Centralized configuration using Pydantic BaseSettings.

Configuration is resolved once, before any provider is built:
- Pydantic BaseSettings for type-safe environment variable loading
- Validation at construction (fail-fast)
- Environment file support (.env)

Usage:
    from llm_core.config import configure_logging, get_settings

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)  # applications only; importing configures nothing
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContentGeneratorConfig(BaseModel):
    """Options handed to the remote model-serving client."""

    api_key: str = ""
    vertexai: bool = False


class Settings(BaseSettings):
    """
    Client settings with environment variable support.

    Configuration Sources:
        1. Environment variables
        2. .env file (if present)
        3. Default values (defined below)

    LLM_PROVIDER is kept as a plain string. Deciding whether a selector is
    recognized belongs to the provider factory, which names the bad value
    in its error.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
        validate_default=True,
    )

    # =========================================================================
    # Logging
    # =========================================================================

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    # =========================================================================
    # LLM Provider Configuration
    # =========================================================================

    LLM_PROVIDER: str = Field(
        default="remote",
        description="Active LLM provider: 'remote' (Gemini API) or 'local' (mocked)",
    )

    # Gemini Configuration (https://aistudio.google.com/app/apikey)
    GEMINI_API_KEY: str = Field(
        default="",
        description="Gemini API key (empty lets the SDK resolve credentials itself)",
    )
    GOOGLE_GENAI_USE_VERTEXAI: bool = Field(
        default=False,
        description="Route requests through Vertex AI instead of the Gemini API",
    )

    # =========================================================================
    # Client Identification
    # =========================================================================

    CLI_VERSION: str | None = Field(
        default=None,
        description="Client version reported in the User-Agent header",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Ensure LOG_LEVEL is uppercase."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("LLM_PROVIDER", mode="before")
    @classmethod
    def lowercase_provider(cls, v: str) -> str:
        """Ensure provider names are lowercase."""
        return v.strip().lower() if isinstance(v, str) else v

    def get_content_generator_config(self) -> ContentGeneratorConfig:
        """Get the nested configuration for the remote model client."""
        return ContentGeneratorConfig(
            api_key=self.GEMINI_API_KEY,
            vertexai=self.GOOGLE_GENAI_USE_VERTEXAI,
        )


# =============================================================================
# Settings Factory with Caching
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache for singleton behavior while allowing
    cache invalidation in tests.
    """
    return Settings()


# =============================================================================
# Logging Configuration
# =============================================================================

class SanitizingFormatter(logging.Formatter):
    """
    Logging formatter that keeps Google credentials out of log output.

    Redacts:
    - Gemini API keys (``AIza...``), wherever they appear
    - ``GEMINI_API_KEY=...`` / ``api_key=...`` assignments
    - ``x-goog-api-key`` headers
    - OAuth bearer tokens used for Vertex AI
    """

    REDACTED: ClassVar[str] = "[REDACTED]"

    SENSITIVE_PATTERNS: ClassVar[list[tuple[re.Pattern[str], str]]] = [
        (re.compile(r'\bAIza[0-9A-Za-z_\-]{10,}'), REDACTED),
        (re.compile(r'((?:gemini_)?api[_-]?key["\']?\s*[:=]\s*["\']?)[^"\'\s,}]+', re.I), r'\1' + REDACTED),
        (re.compile(r'(x-goog-api-key["\']?\s*[:=]\s*["\']?)[^"\'\s,}]+', re.I), r'\1' + REDACTED),
        (re.compile(r'(Bearer\s+)[^\s"\']+', re.I), r'\1' + REDACTED),
    ]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            message = pattern.sub(replacement, message)
        return message


def configure_logging(log_level: str = "INFO") -> None:
    """
    Install the redacting handler on the root logger.

    Meant for entry points such as scripts/provider_chat.py. The package
    itself never calls this, so importing it leaves host logging alone.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler],
        force=True,
    )

    # SDK transport loggers echo request details at DEBUG
    for logger_name in ("httpx", "httpcore", "google_genai", "google.auth", "urllib3"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package's ``llm.*`` namespace."""
    return logging.getLogger(name)

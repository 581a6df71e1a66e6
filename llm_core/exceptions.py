"""
Custom exceptions for the LLM provider layer.

Only configuration problems are raised from here. Failures coming out of the
model SDK are left untouched and reach the caller as the SDK raised them.

Exception Hierarchy:
    LLMCoreException (base)
    └── ConfigurationError
        └── UnsupportedProviderError

Usage:
    from llm_core.exceptions import UnsupportedProviderError

    raise UnsupportedProviderError("ollama")
"""
from __future__ import annotations

from typing import Any


class LLMCoreException(Exception):
    """
    Base exception for all provider-layer errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details (optional)
        error_code: Machine-readable error code (optional)
    """

    default_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        details: str | None = None,
        error_code: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for structured reporting.

        Returns:
            Dictionary with error details
        """
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(LLMCoreException):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - Unknown provider selector
        - Invalid configuration values
    """

    default_message = "Configuration error"


class UnsupportedProviderError(ConfigurationError):
    """Raised by the provider factory for an unrecognized provider kind."""

    def __init__(self, provider: object, supported: list[str] | None = None) -> None:
        self.provider = provider
        details = f"Supported: {', '.join(supported)}" if supported else None
        super().__init__(f"Unsupported LLM provider: {provider}", details=details)

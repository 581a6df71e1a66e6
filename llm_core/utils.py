"""
Utility functions for the provider layer.

Provides the host introspection used to build the diagnostic
User-Agent header sent with every remote request.
"""
from __future__ import annotations

import platform
import sys

CLIENT_NAME = "GeminiCLI"


def get_client_version(cli_version: str | None = None) -> str:
    """
    Get the client version for the User-Agent header.

    Args:
        cli_version: Configured client version (empty or None falls back)

    Returns:
        The configured version, or the interpreter version when unset
    """
    return cli_version or platform.python_version()


def build_user_agent(cli_version: str | None = None) -> str:
    """
    Build the diagnostic User-Agent header value.

    Format: ``GeminiCLI/<version> (<platform>; <arch>)``
    """
    version = get_client_version(cli_version)
    return f"{CLIENT_NAME}/{version} ({sys.platform}; {platform.machine()})"

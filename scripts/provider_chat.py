#!/usr/bin/env python3
"""
Terminal chat against the configured LLM provider.
Builds the provider via the factory and streams replies to the terminal.

Usage:
    LLM_PROVIDER=local python scripts/provider_chat.py
"""

import asyncio
import os
import sys
import uuid
from typing import List

from google.genai import types

from llm_core import (
    CountTokensRequest,
    GenerateContentRequest,
    LLMProviderInterface,
    create_llm_provider,
)
from llm_core.config import configure_logging, get_settings

# Model used for remote requests, overridable via env
CHAT_MODEL = os.getenv("CHAT_MODEL", "gemini-2.0-flash")


# ANSI Colors
class Colors:
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"


def print_banner():
    """Print welcome banner."""
    print(f"""
{Colors.CYAN}{Colors.BOLD}LLM provider terminal client ({get_settings().LLM_PROVIDER}){Colors.RESET}
{Colors.DIM}Commands: /tokens (count tokens in the last message), /clear, /quit{Colors.RESET}
""")


def print_error(message: str):
    """Print error message."""
    print(f"\n{Colors.RED}{Colors.BOLD}Error:{Colors.RESET} {message}")


def print_info(message: str):
    """Print info message."""
    print(f"\n{Colors.YELLOW}{Colors.BOLD}Info:{Colors.RESET} {message}")


async def send_message(
    provider: LLMProviderInterface,
    history: List[types.Content],
) -> str:
    """Stream the provider's reply to the current history."""
    request = GenerateContentRequest(model=CHAT_MODEL, contents=history)
    full_response = ""

    print(f"\n{Colors.CYAN}{Colors.BOLD}Model:{Colors.RESET} ", end="", flush=True)
    stream = await provider.generate_content_stream(request, str(uuid.uuid4()))
    async for chunk in stream:
        text = chunk.text or ""
        full_response += text
        print(text, end="", flush=True)
    print()
    return full_response


async def count_tokens(provider: LLMProviderInterface, history: List[types.Content]) -> None:
    """Print the token count of the last message in the history."""
    if not history:
        print_info("No messages yet.")
        return
    request = CountTokensRequest(model=CHAT_MODEL, contents=history[-1:])
    response = await provider.count_tokens(request)
    print_info(f"Last message tokens: {response.total_tokens}")


async def main():
    """Main chat loop."""
    configure_logging(get_settings().LOG_LEVEL)
    print_banner()
    provider = create_llm_provider()
    history: List[types.Content] = []

    while True:
        try:
            user_input = input(f"\n{Colors.GREEN}{Colors.BOLD}You:{Colors.RESET} ").strip()
        except (KeyboardInterrupt, EOFError):
            print_info("Goodbye!")
            break

        if not user_input:
            continue

        command = user_input.lower()
        if command == "/quit":
            print_info("Goodbye!")
            break
        if command == "/clear":
            history.clear()
            print_info("Chat history cleared.")
            continue
        if command == "/tokens":
            try:
                await count_tokens(provider, history)
            except Exception as e:
                print_error(f"Token count failed: {e}")
            continue

        history.append(types.Content(role="user", parts=[types.Part(text=user_input)]))
        try:
            reply = await send_message(provider, history)
        except Exception as e:
            print_error(f"Request failed: {e}")
            history.pop()
            continue
        history.append(types.Content(role="model", parts=[types.Part(text=reply)]))


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)

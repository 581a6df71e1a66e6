# tests/conftest.py
import os
import logging
from types import SimpleNamespace

import pytest

# Ensure test-friendly env: no real credentials, mocked provider by default
os.environ.setdefault("LLM_PROVIDER", "local")
os.environ.setdefault("LOG_LEVEL", "INFO")

# IMPORTANT: import the package after envs are set
from llm_core.config import Settings
from llm_core.providers.local_impl import LocalLLMProvider


class FakeAsyncModels:
    """Stand-in for google.genai AsyncModels recording every call."""

    def __init__(self):
        self.calls = []
        self.results = {}
        self.errors = {}

    async def _dispatch(self, name, **kwargs):
        self.calls.append((name, kwargs))
        if name in self.errors:
            raise self.errors[name]
        return self.results.get(name)

    async def generate_content(self, **kwargs):
        return await self._dispatch("generate_content", **kwargs)

    async def generate_content_stream(self, **kwargs):
        return await self._dispatch("generate_content_stream", **kwargs)

    async def count_tokens(self, **kwargs):
        return await self._dispatch("count_tokens", **kwargs)

    async def embed_content(self, **kwargs):
        return await self._dispatch("embed_content", **kwargs)


class FakeClient:
    """Stand-in for google.genai.Client capturing constructor options."""

    instances = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.aio = SimpleNamespace(models=FakeAsyncModels())
        FakeClient.instances.append(self)


@pytest.fixture
def fake_models():
    return FakeAsyncModels()


@pytest.fixture
def fake_client(monkeypatch):
    # Replace the SDK client the factory builds; restored after each test
    import llm_core.providers as providers_module

    FakeClient.instances = []
    monkeypatch.setattr(providers_module.genai, "Client", FakeClient)
    return FakeClient


@pytest.fixture
def make_settings():
    def _make(**overrides):
        return Settings(**overrides)
    return _make


@pytest.fixture
def local_provider():
    return LocalLLMProvider()


@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog

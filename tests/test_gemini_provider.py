# tests/test_gemini_provider.py
import pytest
from google.genai import types

from llm_core.models import CountTokensRequest, EmbedContentRequest, GenerateContentRequest
from llm_core.providers.gemini_impl import GoogleGeminiProvider


class TransportFailure(RuntimeError):
    pass


def _generate_request():
    return GenerateContentRequest(
        model="gemini-2.0-flash",
        contents="hello",
        config=types.GenerateContentConfig(temperature=0.2),
    )


def _assert_forwarded(fake_models, name, request):
    # Exactly one SDK call, with the request's own field objects
    assert [c[0] for c in fake_models.calls] == [name]
    kwargs = fake_models.calls[0][1]
    assert set(kwargs) == {"model", "contents", "config"}
    assert kwargs["model"] is request.model
    assert kwargs["contents"] is request.contents
    assert kwargs["config"] is request.config


@pytest.mark.asyncio
async def test_generate_content_forwards(fake_models):
    expected = types.GenerateContentResponse(candidates=[])
    fake_models.results["generate_content"] = expected
    provider = GoogleGeminiProvider(fake_models)
    request = _generate_request()

    result = await provider.generate_content(request, "prompt-1")

    assert result is expected
    _assert_forwarded(fake_models, "generate_content", request)


@pytest.mark.asyncio
async def test_generate_content_stream_forwards(fake_models):
    chunks = [
        types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part(text=t)]))]
        )
        for t in ("he", "llo")
    ]

    async def sdk_stream():
        for chunk in chunks:
            yield chunk

    stream_obj = sdk_stream()
    fake_models.results["generate_content_stream"] = stream_obj
    provider = GoogleGeminiProvider(fake_models)
    request = _generate_request()

    stream = await provider.generate_content_stream(request, "prompt-1")

    assert stream is stream_obj
    received = [c async for c in stream]
    assert "".join(c.text for c in received) == "hello"
    _assert_forwarded(fake_models, "generate_content_stream", request)


@pytest.mark.asyncio
async def test_count_tokens_forwards(fake_models):
    expected = types.CountTokensResponse(total_tokens=42)
    fake_models.results["count_tokens"] = expected
    provider = GoogleGeminiProvider(fake_models)
    request = CountTokensRequest(model="gemini-2.0-flash", contents="count me")

    assert await provider.count_tokens(request) is expected
    _assert_forwarded(fake_models, "count_tokens", request)


@pytest.mark.asyncio
async def test_embed_content_forwards(fake_models):
    expected = types.EmbedContentResponse(
        embeddings=[types.ContentEmbedding(values=[0.5, 0.25])]
    )
    fake_models.results["embed_content"] = expected
    provider = GoogleGeminiProvider(fake_models)
    request = EmbedContentRequest(
        model="gemini-embedding-001",
        contents=["a", "b"],
        config=types.EmbedContentConfig(output_dimensionality=2),
    )

    assert await provider.embed_content(request) is expected
    _assert_forwarded(fake_models, "embed_content", request)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, call",
    [
        ("generate_content", lambda p: p.generate_content(_generate_request(), "id")),
        ("generate_content_stream", lambda p: p.generate_content_stream(_generate_request(), "id")),
        ("count_tokens", lambda p: p.count_tokens(CountTokensRequest(model="m", contents="x"))),
        ("embed_content", lambda p: p.embed_content(EmbedContentRequest(model="m", contents="x"))),
    ],
)
async def test_transport_errors_propagate_unmodified(fake_models, name, call):
    # The provider neither catches nor wraps SDK failures
    error = TransportFailure("network dropped")
    fake_models.errors[name] = error
    provider = GoogleGeminiProvider(fake_models)

    with pytest.raises(TransportFailure) as excinfo:
        await call(provider)

    assert excinfo.value is error
    assert len(fake_models.calls) == 1


@pytest.mark.asyncio
async def test_prompt_id_is_not_forwarded(fake_models):
    provider = GoogleGeminiProvider(fake_models)
    await provider.generate_content(_generate_request(), "secret-correlation-id")
    assert "secret-correlation-id" not in repr(fake_models.calls)


def test_identity(fake_models):
    provider = GoogleGeminiProvider(fake_models)
    assert provider.get_provider_name() == "gemini"
    assert provider.user_tier is None

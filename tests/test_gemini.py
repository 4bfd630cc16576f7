"""Tests for GeminiClient — real SDK request/response handling, fake transport."""

import pytest
from google.api_core.exceptions import InvalidArgument
from google.generativeai import protos

from services import gemini
from services.ai import GENERATION_CONFIG, UPSTREAM_TIMEOUT_SECONDS, ChatGateway, extract_reply_text
from services.gemini import GeminiClient, get_gemini_client
from tests.fakes import make_settings


class FakeAsyncTransport:
    """Stands in for the SDK's async generative service client."""

    def __init__(self, response: protos.GenerateContentResponse | None = None, error: Exception | None = None):
        self._response = response if response is not None else protos.GenerateContentResponse()
        self._error = error
        self.requests: list[tuple[protos.GenerateContentRequest, dict]] = []

    async def generate_content(self, request, **kwargs):
        self.requests.append((request, kwargs))
        if self._error is not None:
            raise self._error
        return self._response


def _text_response(text: str) -> protos.GenerateContentResponse:
    return protos.GenerateContentResponse(
        candidates=[
            protos.Candidate(
                content=protos.Content(role="model", parts=[protos.Part(text=text)]),
            ),
        ],
    )


def _client(transport: FakeAsyncTransport) -> GeminiClient:
    client = GeminiClient(api_key="test-key", model_name="gemini-test")
    client.model._async_client = transport
    return client


async def _generate(client: GeminiClient):
    return await client.generate_content(
        contents=[{"role": "user", "parts": [{"text": "hi"}]}],
        generation_config=GENERATION_CONFIG.model_dump(),
        timeout=UPSTREAM_TIMEOUT_SECONDS,
    )


@pytest.fixture(autouse=True)
def _fresh_client_cache():
    get_gemini_client.cache_clear()
    yield
    get_gemini_client.cache_clear()


class TestGeminiClient:
    @pytest.mark.asyncio
    async def test_response_becomes_plain_dict(self):
        out = await _generate(_client(FakeAsyncTransport(_text_response("hi there"))))

        assert isinstance(out, dict)
        assert extract_reply_text(out) == "hi there"

    @pytest.mark.asyncio
    async def test_empty_response_has_no_reply_text(self):
        out = await _generate(_client(FakeAsyncTransport(protos.GenerateContentResponse())))
        assert extract_reply_text(out) is None

    @pytest.mark.asyncio
    async def test_request_carries_generation_config_and_timeout(self):
        transport = FakeAsyncTransport(_text_response("ok"))
        await _generate(_client(transport))

        request, kwargs = transport.requests[0]
        assert kwargs == {"timeout": 15.0}
        assert request.generation_config.max_output_tokens == 2048
        assert request.generation_config.temperature == pytest.approx(0.7)
        assert request.generation_config.top_p == pytest.approx(0.95)
        assert request.generation_config.top_k == 40
        assert request.contents[0].role == "user"
        assert request.contents[0].parts[0].text == "hi"

    @pytest.mark.asyncio
    async def test_sdk_invalid_key_error_maps_to_401(self):
        error = InvalidArgument('API key not valid. Please pass a valid API key. [reason: "API_KEY_INVALID"]')
        client = _client(FakeAsyncTransport(error=error))
        gateway = ChatGateway(settings=make_settings(), client_factory=lambda api_key, model_name: client)

        response, status_code = await gateway.handle("POST", {"message": "hi"})

        assert status_code == 401
        assert response.response == ""


class TestGetGeminiClient:
    def test_configures_sdk_once(self, monkeypatch):
        configured: list[str] = []
        monkeypatch.setattr(gemini.genai, "configure", lambda api_key: configured.append(api_key))

        first = get_gemini_client("test-key", "gemini-test")
        second = get_gemini_client("test-key", "gemini-test")

        assert first is second
        assert configured == ["test-key"]

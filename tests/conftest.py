"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from services.ai import ChatGateway, get_chat_gateway
from tests.fakes import FakeClientFactory, FakeGeminiClient, make_settings


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def client_factory(fake_client: FakeGeminiClient) -> FakeClientFactory:
    return FakeClientFactory(fake_client)


@pytest.fixture
def gateway(client_factory: FakeClientFactory) -> ChatGateway:
    return ChatGateway(settings=make_settings(), client_factory=client_factory)


@pytest.fixture
def http_client(gateway: ChatGateway):
    app.dependency_overrides[get_chat_gateway] = lambda: gateway
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def http_client_factory():
    """Build a TestClient whose gateway talks to the given fake client."""

    def _make(client: FakeGeminiClient, api_key: str | None = "test-key") -> TestClient:
        gateway = ChatGateway(settings=make_settings(api_key), client_factory=FakeClientFactory(client))
        app.dependency_overrides[get_chat_gateway] = lambda: gateway
        return TestClient(app)

    try:
        yield _make
    finally:
        app.dependency_overrides.clear()

"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: Chat client config pointing at a fake webhook
    - recorded_requests: Requests seen by the mock transport
    - make_transport: Builds an httpx.MockTransport from a handler
    - webhook_transport: ASGI transport serving the local webhook app
"""

from collections.abc import Callable

import httpx
import pytest

from src.api import app
from src.client.config import ChatClientConfig

WEBHOOK_URL = "http://n8n.test/webhook/chat"


@pytest.fixture
def client_config() -> ChatClientConfig:
    """Return config with a fixed webhook URL.

    Returns:
        ChatClientConfig independent of the environment.
    """
    return ChatClientConfig(webhook_url=WEBHOOK_URL, chat_id_header="X-N8N-CHAT-ID")


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_transport(
    recorded_requests: list[httpx.Request],
) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]:
    """Build a mock transport that records every request it handles."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.MockTransport(recording_handler)

    return factory


@pytest.fixture
def webhook_transport() -> httpx.ASGITransport:
    """Transport that routes requests into the local webhook app."""
    return httpx.ASGITransport(app=app)

"""Chat client configuration with environment variable loading.

Pydantic-based configuration for the workflow webhook client. The webhook
URL is usually typed into the UI, so it may be empty here; it is checked
at send time by ``validate_webhook_url``.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from src.client.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_CHAT_ID_HEADER = "X-N8N-CHAT-ID"
DEFAULT_GREETING = "Hello! Please enter your n8n Chat Trigger Webhook URL above to begin."
NEW_CHAT_GREETING = "New chat started. Your conversation history has been cleared."
INVALID_URL_MESSAGE = "Please enter a valid n8n Webhook URL to start chatting."
EMPTY_INPUT_MESSAGE = "Please enter a message to send."


class ChatClientConfig(BaseModel):
    """Configuration for the workflow chat client.

    Attributes:
        webhook_url: Chat Trigger webhook to post messages to.
        chat_id_header: Header carrying the conversation id both ways.
        greeting: Seed bot message of a fresh session.
        new_chat_greeting: Seed bot message after "new chat".
    """

    webhook_url: str = Field(
        default_factory=lambda: os.getenv("N8N_WEBHOOK_URL", ""),
        description="n8n Chat Trigger webhook URL",
    )
    chat_id_header: str = Field(
        default_factory=lambda: os.getenv("N8N_CHAT_ID_HEADER", DEFAULT_CHAT_ID_HEADER),
        description="Header used to propagate the conversation id",
    )
    greeting: str = Field(default=DEFAULT_GREETING)
    new_chat_greeting: str = Field(default=NEW_CHAT_GREETING)

    @field_validator("webhook_url")
    @classmethod
    def strip_webhook_url(cls, v: str) -> str:
        return v.strip()

    @field_validator("chat_id_header")
    @classmethod
    def validate_chat_id_header(cls, v: str) -> str:
        """Validate that the correlation header name is non-empty."""
        if not v or not v.strip():
            raise ValueError("Chat id header name must not be empty")
        return v.strip()


def validate_webhook_url(url: str | None) -> str:
    """Check a webhook URL before any request is made.

    Args:
        url: URL as entered by the user.

    Returns:
        The stripped URL.

    Raises:
        ConfigurationError: If the URL is missing or does not start with http.
    """
    cleaned = (url or "").strip()
    if not cleaned or not cleaned.startswith("http"):
        raise ConfigurationError(INVALID_URL_MESSAGE)
    return cleaned


def get_client_config() -> ChatClientConfig:
    """Create chat client configuration from environment.

    Returns:
        Configured ChatClientConfig instance.
    """
    return ChatClientConfig()

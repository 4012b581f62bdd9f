"""Pydantic models shared by the chat client and the local webhook.

Provides type safety and validation for everything that crosses the wire
or lives in the conversation log.

Models:
    - Sender: Message author (user or bot)
    - Message: One entry in the conversation log
    - ChatTurnRequest: Outbound payload posted by the client
    - WebhookRequest: Payload received by the local webhook
    - ResponseFrame: Decoded JSON body or ``data:`` frame
"""

from src.models.schemas import (
    ChatTurnRequest,
    Message,
    MessageSealedError,
    ResponseFrame,
    Sender,
    WebhookRequest,
)

__all__ = ["ChatTurnRequest", "Message", "MessageSealedError", "ResponseFrame", "Sender", "WebhookRequest"]

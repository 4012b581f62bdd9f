from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class MessageSealedError(RuntimeError):
    """Raised when text is written to a message that is already final."""


class Message(BaseModel):
    """A single entry in the conversation log.

    Bot placeholders start open and receive streamed text until sealed.
    User messages are sealed on creation.

    Attributes:
        sender: Who wrote the message.
        text: Message body.
        is_error: Whether the body is a normalized error.
        sealed: Whether the message is final.
    """

    sender: Sender
    text: str = ""
    is_error: bool = False
    sealed: bool = False

    def append(self, fragment: str) -> None:
        if self.sealed:
            raise MessageSealedError("Cannot append to a sealed message")
        self.text += fragment

    def replace(self, text: str) -> None:
        if self.sealed:
            raise MessageSealedError("Cannot replace text of a sealed message")
        self.text = text

    def seal(self, *, error: str | None = None) -> None:
        """Finalize the message, optionally overwriting it with an error."""
        if self.sealed:
            return
        if error is not None:
            self.text = error
            self.is_error = True
        self.sealed = True


class ChatTurnRequest(BaseModel):
    """Outbound payload posted by the client, sent exactly as typed.

    Attributes:
        message: The user's message.
    """

    message: str


class WebhookRequest(BaseModel):
    """Payload received by the local workflow webhook.

    Attributes:
        message: The user's message.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ResponseFrame(BaseModel):
    """One decoded unit of workflow output.

    Comes from either a whole JSON body or a single ``data:`` line.
    Only ``text`` is interpreted; other fields are kept but ignored.

    Attributes:
        text: Text fragment carried by the frame, if any.
    """

    model_config = ConfigDict(extra="allow")

    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str | None:
        """Treat falsy values as absent and render scalars as strings."""
        if not v:
            return None
        if isinstance(v, (int, float)):
            return str(v)
        return v

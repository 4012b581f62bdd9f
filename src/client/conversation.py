"""Conversation state owned by the chat engine.

The presentation layer only reads this object. All mutation goes through
the methods below, called from ``ChatEngine``.
"""

from src.client.config import DEFAULT_CHAT_ID_HEADER, DEFAULT_GREETING
from src.client.correlation import CorrelationTracker
from src.models.schemas import Message, Sender


class ConversationState:
    """Ordered message log, loading flag, error banner and chat id.

    At most one message is open at a time. It is always the last one and
    always a bot message.
    """

    def __init__(
        self,
        greeting: str = DEFAULT_GREETING,
        chat_id_header: str = DEFAULT_CHAT_ID_HEADER,
    ) -> None:
        self.messages: list[Message] = []
        self.pending: bool = False
        self.error: str | None = None
        self.correlation = CorrelationTracker(chat_id_header)
        self.generation = 0
        self._seed(greeting)

    @property
    def correlation_id(self) -> str | None:
        return self.correlation.chat_id

    @property
    def open_message(self) -> Message | None:
        """The bot message still receiving text, if any."""
        if self.messages and not self.messages[-1].sealed:
            return self.messages[-1]
        return None

    def _seed(self, greeting: str) -> None:
        self.messages = [Message(sender=Sender.BOT, text=greeting, sealed=True)]

    def begin_turn(self, text: str) -> Message:
        """Log the user's message and open an empty bot placeholder.

        Returns:
            The open placeholder.
        """
        if self.open_message is not None:
            raise RuntimeError("A bot message is already open")

        self.messages.append(Message(sender=Sender.USER, text=text, sealed=True))
        placeholder = Message(sender=Sender.BOT)
        self.messages.append(placeholder)
        return placeholder

    def reset(self, greeting: str) -> None:
        """Start a new chat: fresh seed message, no chat id, no banner.

        Any turn still in flight is detached from the new session.
        """
        self.generation += 1
        self.correlation.reset()
        self.error = None
        self.pending = False
        self._seed(greeting)

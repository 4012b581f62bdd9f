"""Chat engine: dispatches turns to the workflow and reconciles replies.

One ``ChatEngine`` owns one ``ConversationState``. A turn posts the user's
message, classifies the reply, reassembles streamed text into the bot
placeholder, and seals that placeholder on success or failure.
"""

import logging
from collections.abc import Callable

import httpx

from src.client.classifier import SingleObject, classify
from src.client.config import (
    EMPTY_INPUT_MESSAGE,
    ChatClientConfig,
    get_client_config,
    validate_webhook_url,
)
from src.client.conversation import ConversationState
from src.client.errors import (
    BodyDecodeError,
    ConfigurationError,
    FrameDecodeError,
    TransportError,
    normalize_error,
)
from src.client.frames import decode_frame
from src.client.reassembler import StreamReassembler
from src.models.schemas import ChatTurnRequest, Message, ResponseFrame

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "Request was cancelled before the workflow replied"


class ChatEngine:
    """Runs chat turns against a single workflow webhook.

    Only one turn may be in flight. A send while another is pending is
    rejected rather than queued. Exceptions never escape ``send``; they are
    normalized into the banner and the bot placeholder. Cancellation is
    re-raised, but only after the placeholder is sealed and the turn released.
    """

    def __init__(
        self,
        config: ChatClientConfig | None = None,
        on_change: Callable[[ConversationState], None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the chat engine.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            on_change: Called after every state mutation.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config or get_client_config()
        self._on_change = on_change
        self._transport = transport
        self.webhook_url = self._config.webhook_url
        self.state = ConversationState(
            greeting=self._config.greeting,
            chat_id_header=self._config.chat_id_header,
        )

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    def _client(self) -> httpx.AsyncClient:
        # No timeout: a hung workflow holds the turn until the transport fails.
        return httpx.AsyncClient(
            timeout=None, follow_redirects=True, transport=self._transport
        )

    def new_chat(self) -> None:
        """Reset the conversation, even while a turn is in flight."""
        self.state.reset(self._config.new_chat_greeting)
        logger.info("Started new chat session")
        self._notify()

    async def send(self, text: str, webhook_url: str | None = None) -> Message | None:
        """Send one user message and reconcile the workflow's reply.

        Args:
            text: The user's message.
            webhook_url: Overrides the configured webhook URL.

        Returns:
            The sealed bot message, or None if the send was rejected.
        """
        state = self.state
        if state.pending:
            logger.warning("Rejected send: a response is still in progress")
            return None

        if webhook_url is not None:
            self.webhook_url = webhook_url

        try:
            if not text or not text.strip():
                raise ConfigurationError(EMPTY_INPUT_MESSAGE)
            url = validate_webhook_url(self.webhook_url)
        except ConfigurationError as e:
            logger.warning(f"Rejected send: {e}")
            state.error = normalize_error(e)
            self._notify()
            return None

        generation = state.generation
        placeholder = state.begin_turn(text)
        state.error = None
        state.pending = True
        self._notify()

        try:
            await self._run_turn(url, text, placeholder, generation)
            placeholder.seal()
        except Exception as e:
            logger.error(f"Error sending message to workflow: {e}")
            self._fail(placeholder, generation, normalize_error(e))
        finally:
            # Cancellation bypasses the handler above; never leave the turn open.
            if not placeholder.sealed:
                logger.warning("Turn was cancelled before the reply completed")
                self._fail(
                    placeholder, generation, normalize_error(TransportError(CANCELLED_MESSAGE))
                )
            if state.generation == generation:
                state.pending = False
            self._notify()

        return placeholder

    def _fail(self, placeholder: Message, generation: int, message: str) -> None:
        if self.state.generation == generation:
            self.state.error = message
        placeholder.seal(error=message)

    async def _run_turn(
        self,
        url: str,
        text: str,
        placeholder: Message,
        generation: int,
    ) -> None:
        state = self.state
        headers = state.correlation.apply({"Content-Type": "application/json"})
        payload = ChatTurnRequest(message=text)

        def append(fragment: str) -> None:
            placeholder.append(fragment)
            self._notify()

        async with self._client() as client:
            try:
                async with client.stream(
                    "POST",
                    url,
                    content=payload.model_dump_json(),
                    headers=headers,
                ) as response:
                    if not response.is_success:
                        await response.aread()
                        raise TransportError.from_status(response.status_code, response.text)

                    if state.generation == generation:
                        state.correlation.capture(response.headers)

                    kind = classify(response.headers)
                    if isinstance(kind, SingleObject):
                        frame = await self._read_single_object(response)
                        if frame.text:
                            placeholder.replace(frame.text)
                            self._notify()
                    else:
                        reassembler = StreamReassembler(
                            append, encoding=response.charset_encoding or "utf-8"
                        )
                        await reassembler.run(response.aiter_bytes())
                        if reassembler.skipped_frames:
                            logger.info(
                                f"Skipped {reassembler.skipped_frames} malformed stream frames"
                            )
            except httpx.HTTPError as e:
                raise TransportError(str(e) or type(e).__name__) from e

    @staticmethod
    async def _read_single_object(response: httpx.Response) -> ResponseFrame:
        await response.aread()
        try:
            return decode_frame(response.text)
        except FrameDecodeError as e:
            raise BodyDecodeError(
                f"Failed to decode JSON response: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

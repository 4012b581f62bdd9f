"""Integration tests for ChatEngine talking to the local webhook.

No mocks - the engine posts real requests into the FastAPI app through
ASGITransport and reconciles whatever comes back.
"""

from httpx import ASGITransport

from src.client.config import ChatClientConfig
from src.client.engine import ChatEngine
from src.models.schemas import Sender

BASE_URL = "http://test/webhook/chat"


def make_engine(transport: ASGITransport, query: str = "delay=0") -> ChatEngine:
    config = ChatClientConfig(webhook_url=f"{BASE_URL}?{query}")
    return ChatEngine(config=config, transport=transport)


class TestChatRoundtrip:
    """End-to-end turns against the local webhook."""

    async def test_streamed_reply(self, webhook_transport: ASGITransport) -> None:
        """A streamed reply is reassembled into one bot message."""
        engine = make_engine(webhook_transport)

        reply = await engine.send("stream me please")

        assert reply.text.startswith("You said: stream me please (chat ")
        assert reply.sealed
        assert not reply.is_error
        assert not engine.state.pending

    async def test_json_reply(self, webhook_transport: ASGITransport) -> None:
        """A single JSON reply sets the bot message."""
        engine = make_engine(webhook_transport, "mode=json")

        reply = await engine.send("json please")

        assert reply.text.startswith("You said: json please")

    async def test_workflow_error(self, webhook_transport: ASGITransport) -> None:
        """A workflow failure is normalized and sealed as an error."""
        engine = make_engine(webhook_transport, "mode=error&detail=Invalid%20API%20key")

        reply = await engine.send("fail please")

        assert reply.is_error
        assert 'An error occurred in your n8n workflow: "Invalid API key"' in reply.text
        assert engine.state.error == reply.text
        assert not engine.state.pending

    async def test_chat_id_carries_across_turns(self, webhook_transport: ASGITransport) -> None:
        """The id issued on the first turn is reused for the second."""
        engine = make_engine(webhook_transport)

        first = await engine.send("one")
        chat_id = engine.state.correlation_id
        second = await engine.send("two")

        assert chat_id
        assert engine.state.correlation_id == chat_id
        assert f"(chat {chat_id[:8]})" in first.text
        assert f"(chat {chat_id[:8]})" in second.text
        assert [m.sender for m in engine.state.messages] == [
            Sender.BOT,
            Sender.USER,
            Sender.BOT,
            Sender.USER,
            Sender.BOT,
        ]

    async def test_new_chat_gets_new_id(self, webhook_transport: ASGITransport) -> None:
        """After a new chat the webhook issues a different id."""
        engine = make_engine(webhook_transport)

        await engine.send("one")
        old_id = engine.state.correlation_id
        engine.new_chat()
        await engine.send("two")

        assert engine.state.correlation_id
        assert engine.state.correlation_id != old_id
        assert len(engine.state.messages) == 3

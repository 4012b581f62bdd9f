"""Local stand-in for an n8n Chat Trigger webhook.

Mimics what the client sees from a real workflow, for development and
integration tests.
"""

import asyncio
import json
import logging
import re
import uuid
from collections.abc import AsyncGenerator
from enum import Enum

from fastapi import APIRouter, Header, Query
from fastapi.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse

from src.client.config import DEFAULT_CHAT_ID_HEADER
from src.models.schemas import WebhookRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhook"])

STREAM_DELAY_SECONDS = 0.02


class ReplyMode(str, Enum):
    """How the stand-in answers a turn."""

    STREAM = "stream"
    JSON = "json"
    ERROR = "error"


def build_reply(message: str, chat_id: str) -> str:
    return f"You said: {message} (chat {chat_id[:8]})"


def _split_words(text: str) -> list[str]:
    return re.findall(r"\S+\s*", text)


async def _stream_frames(text: str, delay: float) -> AsyncGenerator[str]:
    """Yield one ``data:`` line per word, like a streaming workflow."""
    for word in _split_words(text):
        yield f"data: {json.dumps({'text': word})}\n"
        if delay:
            await asyncio.sleep(delay)


@router.post("/chat")
async def chat_webhook(
    payload: WebhookRequest,
    mode: ReplyMode = Query(ReplyMode.STREAM),
    detail: str = Query("Simulated workflow failure"),
    delay: float = Query(STREAM_DELAY_SECONDS, ge=0.0, le=5.0),
    chat_id: str | None = Header(None, alias=DEFAULT_CHAT_ID_HEADER),
) -> Response:
    """Answer one chat turn.

    Issues a chat id on the first turn and echoes it afterwards.

    Args:
        payload: The posted message.
        mode: stream (default), json, or error.
        detail: Error message used in error mode.
        delay: Pause between streamed frames, in seconds.
        chat_id: Conversation id sent by the client, if any.

    Returns:
        A ``data:`` stream, a single JSON object, or a 500 error.
    """
    if not chat_id:
        chat_id = uuid.uuid4().hex
        logger.info(f"Issued new chat id {chat_id}")
    headers = {DEFAULT_CHAT_ID_HEADER: chat_id}

    if mode == ReplyMode.ERROR:
        body = f"Workflow error: {json.dumps({'message': detail})}"
        return PlainTextResponse(body, status_code=500, headers=headers)

    reply = build_reply(payload.message, chat_id)
    if mode == ReplyMode.JSON:
        return JSONResponse({"text": reply}, headers=headers)

    return StreamingResponse(
        _stream_frames(reply, delay),
        media_type="text/event-stream",
        headers=headers,
    )

"""Parsing of ``data:`` event frames emitted by the workflow stream."""

import json

from pydantic import ValidationError

from src.client.errors import FrameDecodeError
from src.models.schemas import ResponseFrame

DATA_PREFIX = "data:"


def parse_data_line(line: str) -> str | None:
    """Extract the payload of a ``data:`` line.

    Surrounding whitespace is stripped before the prefix check. The payload
    is everything after the five prefix characters, so a single space after
    the colon stays in front of the JSON text.

    Args:
        line: One complete line from the stream.

    Returns:
        The payload, or None for non-data lines and empty payloads.
    """
    stripped = line.strip()
    if not stripped.startswith(DATA_PREFIX):
        return None

    payload = stripped[len(DATA_PREFIX):]
    return payload or None


def decode_frame(payload: str) -> ResponseFrame:
    """Decode a JSON payload into a frame.

    Non-object JSON (numbers, lists, strings) decodes to an empty frame.

    Raises:
        FrameDecodeError: If the payload is not valid JSON or its ``text``
            field has an unusable type.
    """
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as e:
        raise FrameDecodeError(f"Invalid JSON payload: {e}", payload) from e

    if not isinstance(data, dict):
        return ResponseFrame()

    try:
        return ResponseFrame.model_validate(data)
    except ValidationError as e:
        raise FrameDecodeError(f"Invalid frame: {e}", payload) from e

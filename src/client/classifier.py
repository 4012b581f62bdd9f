"""Classification of workflow responses by declared content type."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class SingleObject:
    """The whole body is one JSON object."""

    content_type: str


@dataclass(frozen=True)
class EventStream:
    """The body is a stream of ``data:`` lines."""

    content_type: str | None


ResponseKind = SingleObject | EventStream


def classify(headers: Mapping[str, str]) -> ResponseKind:
    """Pick the decoding path for a response.

    Anything that does not declare JSON, including a missing content type,
    is treated as an event stream. There is no sniffing of the body.

    Args:
        headers: Response headers (case-insensitive mapping).

    Returns:
        SingleObject or EventStream.
    """
    content_type = headers.get("content-type")
    if content_type and JSON_MEDIA_TYPE in content_type:
        kind: ResponseKind = SingleObject(content_type)
    else:
        kind = EventStream(content_type)
    logger.debug(f"Classified response with content type {content_type!r} as {kind}")
    return kind

"""Conversation id propagation between the client and the workflow."""

import logging
from collections.abc import Mapping, MutableMapping

from src.client.config import DEFAULT_CHAT_ID_HEADER

logger = logging.getLogger(__name__)


class CorrelationTracker:
    """Holds the workflow's conversation id for one chat session.

    The first non-empty id returned by the workflow wins and is sent on
    every later request under the same header.
    """

    def __init__(self, header: str = DEFAULT_CHAT_ID_HEADER) -> None:
        self.header = header
        self._chat_id: str | None = None

    @property
    def chat_id(self) -> str | None:
        return self._chat_id

    def apply(self, headers: MutableMapping[str, str]) -> MutableMapping[str, str]:
        """Attach the held id to outgoing request headers."""
        if self._chat_id:
            headers[self.header] = self._chat_id
        return headers

    def capture(self, headers: Mapping[str, str]) -> bool:
        """Store the id from response headers if none is held yet.

        Args:
            headers: Response headers (case-insensitive mapping).

        Returns:
            True if a new id was stored.
        """
        if self._chat_id:
            return False

        value = headers.get(self.header)
        if not value:
            return False

        self._chat_id = value
        logger.info(f"Captured workflow chat id {value}")
        return True

    def reset(self) -> None:
        self._chat_id = None

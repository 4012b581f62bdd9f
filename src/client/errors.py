"""Error types raised by the chat client and their user-facing rendering.

Every failure of a turn ends up as a single string produced by
``normalize_error``. That string is shown as the error banner and written
into the bot placeholder.
"""

import json
import logging
import re

logger = logging.getLogger(__name__)

# Greedy, single-line: first "{" to last "}" on the same line.
_EMBEDDED_JSON = re.compile(r"{.*}")

WORKFLOW_ERROR_TEMPLATE = (
    'An error occurred in your n8n workflow: "{message}"\n\n'
    "Common issues to check:\n"
    "1. Is the workflow active?\n"
    "2. Is the API key in your Google Gemini node valid?\n"
    "3. Is the model name correct?\n"
    "4. Check the workflow execution logs in n8n for more details."
)

GENERIC_ERROR_TEMPLATE = (
    "Error: {detail}. Please check the webhook URL and your n8n workflow."
)


class ChatClientError(Exception):
    """Base class for chat client failures."""

    pass


class ConfigurationError(ChatClientError):
    """Raised when a send is rejected before any network activity."""

    pass


class TransportError(ChatClientError):
    """Raised on a network failure or a non-success HTTP status.

    Attributes:
        status_code: HTTP status, if a response was received.
        body: Response body text, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_status(cls, status_code: int, body: str) -> "TransportError":
        return cls(
            f"Network response was not ok: {status_code} {body}",
            status_code=status_code,
            body=body,
        )


class BodyDecodeError(TransportError):
    """Raised when a single-object response body is not valid JSON."""

    pass


class FrameDecodeError(ChatClientError):
    """Raised when one stream frame cannot be decoded."""

    def __init__(self, message: str, payload: str) -> None:
        super().__init__(message)
        self.payload = payload


def _extract_workflow_message(detail: str) -> str | None:
    match = _EMBEDDED_JSON.search(detail)
    if not match:
        return None

    try:
        payload = json.loads(match.group(0))
    except (ValueError, RecursionError) as e:
        logger.warning(f"Failed to parse workflow error JSON from string: {e}")
        return None

    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if not message:
        return None
    return str(message)


def normalize_error(error: BaseException | str) -> str:
    """Render any failure as a stable, user-presentable message.

    Configuration errors are already user-facing and pass through as is.
    For everything else the raw text is scanned for an embedded JSON
    object; when it carries a ``message`` field the richer workflow
    explanation is returned, otherwise a generic message.

    Args:
        error: The exception (or raw error text) to render.

    Returns:
        The message to show the user. Never raises.
    """
    if isinstance(error, ConfigurationError):
        return str(error)

    detail = str(error)
    workflow_message = _extract_workflow_message(detail)
    if workflow_message is not None:
        return WORKFLOW_ERROR_TEMPLATE.format(message=workflow_message)
    return GENERIC_ERROR_TEMPLATE.format(detail=detail)

"""Workflow chat client - response reconciliation for n8n Chat Trigger webhooks.

Sends user messages to a single webhook and turns whatever comes back into
a consistent conversation log.

Responsibilities:
    - Dispatching turns with the conversation id attached
    - Classifying replies as a single JSON object or a ``data:`` stream
    - Reassembling streamed text fragments in order
    - Normalizing failures into one user-facing message

Owns all conversation state. The UI only reads it.
"""

from src.client.config import ChatClientConfig, get_client_config
from src.client.conversation import ConversationState
from src.client.engine import ChatEngine
from src.client.errors import normalize_error

__all__ = [
    "ChatClientConfig",
    "ChatEngine",
    "ConversationState",
    "get_client_config",
    "normalize_error",
]

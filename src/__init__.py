"""n8n Chat Client - chat with an n8n Chat Trigger workflow.

Combines httpx for webhook calls, Pydantic for data validation, NiceGUI
for the chat interface, and FastAPI for a local workflow stand-in.

Components:
    - client: Dispatch, response reconciliation and conversation state
    - models: Message and wire schemas
    - ui: Web interface for chat interactions
    - api: Local Chat Trigger webhook for development and tests
"""

__version__ = "0.1.0"

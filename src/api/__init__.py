"""Local workflow webhook for development and integration tests.

Endpoints:
    - GET /health: Service health status
    - POST /webhook/chat: Chat Trigger stand-in (stream, json or error reply)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]

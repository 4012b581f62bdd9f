"""Test package for the n8n chat client.

Provides coverage for all components with unit tests for isolated logic
and integration tests against the local webhook.

Structure:
    - unit/: Component tests (parsing, reassembly, errors, engine)
    - integration/: Engine and webhook working together over ASGI

Uses pytest with pytest-asyncio and pytest-check for soft assertions.
"""

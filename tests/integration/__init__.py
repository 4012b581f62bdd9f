"""Integration tests for components working together as a system.

No mocks for core functionality - the chat engine talks to the local
FastAPI webhook through httpx.ASGITransport. No external services needed.
"""

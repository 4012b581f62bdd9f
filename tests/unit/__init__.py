"""Unit tests for individual components in isolation.

Ensures fast execution with no network access.

Coverage:
    - client/: Line buffer, frame parser, reassembler, classifier
    - client/: Correlation tracker, error normalizer, config
    - client/: Conversation state and engine (httpx.MockTransport)

Leverages pytest-check for multiple assertions per test.
"""

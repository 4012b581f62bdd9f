"""Unit tests for response classification."""

import httpx
import pytest

from src.client.classifier import EventStream, SingleObject, classify


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/json; charset=utf-8"],
    )
    def test_json_is_single_object(self, content_type: str) -> None:
        """Declared JSON bodies take the single-object path."""
        kind = classify(httpx.Headers({"Content-Type": content_type}))

        assert kind == SingleObject(content_type)

    def test_media_type_match_is_literal(self) -> None:
        """Only the lowercase JSON media type selects the single-object path."""
        kind = classify(httpx.Headers({"Content-Type": "Application/JSON"}))

        assert isinstance(kind, EventStream)

    @pytest.mark.parametrize(
        "content_type",
        ["text/event-stream", "text/plain", "application/x-ndjson", "text/html"],
    )
    def test_other_types_are_event_stream(self, content_type: str) -> None:
        """Everything else is read as a stream."""
        assert classify(httpx.Headers({"Content-Type": content_type})) == EventStream(
            content_type
        )

    def test_missing_content_type_is_event_stream(self) -> None:
        """No declared type defaults to the stream path."""
        assert classify(httpx.Headers()) == EventStream(None)

    def test_header_lookup_is_case_insensitive(self) -> None:
        """httpx headers match regardless of the header name's case."""
        kind = classify(httpx.Headers({"CONTENT-TYPE": "application/json"}))

        assert isinstance(kind, SingleObject)

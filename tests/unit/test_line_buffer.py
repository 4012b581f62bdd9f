"""Unit tests for LineBuffer."""

import pytest
import pytest_check as check

from src.client.line_buffer import LineBuffer

STREAM = 'data: {"text":"He"}\ndata: {"text":"llo"}\n\n: comment\r\ndata: {"text":"!"}\npartial'
EXPECTED_LINES = STREAM.split("\n")[:-1]


def collect(chunks: list[str]) -> tuple[list[str], str]:
    buffer = LineBuffer()
    lines: list[str] = []
    for chunk in chunks:
        lines.extend(buffer.push(chunk))
    return lines, buffer.remainder


class TestLineBufferSplitting:
    """Tests for line assembly across chunk boundaries."""

    def test_single_chunk(self) -> None:
        """Whole stream in one chunk yields every terminated line."""
        lines, remainder = collect([STREAM])

        check.equal(lines, EXPECTED_LINES)
        check.equal(remainder, "partial")

    @pytest.mark.parametrize("split_at", range(1, len(STREAM)))
    def test_any_two_way_split_gives_same_lines(self, split_at: int) -> None:
        """Splitting the stream anywhere does not change the lines."""
        lines, remainder = collect([STREAM[:split_at], STREAM[split_at:]])

        assert lines == EXPECTED_LINES
        assert remainder == "partial"

    def test_one_character_chunks(self) -> None:
        """Feeding one character at a time gives the same lines."""
        lines, remainder = collect(list(STREAM))

        check.equal(lines, EXPECTED_LINES)
        check.equal(remainder, "partial")

    def test_terminator_alone_completes_held_line(self) -> None:
        """A chunk holding only the terminator completes the held fragment."""
        buffer = LineBuffer()

        check.equal(buffer.push("data: x"), [])
        check.equal(buffer.push("\n"), ["data: x"])
        check.equal(buffer.remainder, "")


class TestLineBufferEdgeCases:
    """Tests for empty input and clearing."""

    def test_empty_chunk_yields_nothing(self) -> None:
        """Empty chunks are ignored."""
        buffer = LineBuffer()

        assert buffer.push("") == []
        assert buffer.remainder == ""

    def test_blank_lines_are_kept(self) -> None:
        """Consecutive terminators produce empty lines."""
        assert LineBuffer().push("a\n\nb\n") == ["a", "", "b"]

    def test_carriage_return_is_part_of_line(self) -> None:
        """Only LF terminates a line; CR stays with the line."""
        assert LineBuffer().push("a\r\n") == ["a\r"]

    def test_clear_returns_and_drops_remainder(self) -> None:
        """clear() hands back the fragment and empties the buffer."""
        buffer = LineBuffer()
        buffer.push("done\nhalf")

        check.equal(buffer.clear(), "half")
        check.equal(buffer.remainder, "")

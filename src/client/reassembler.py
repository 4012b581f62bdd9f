"""Reassembly of streamed workflow output into a single message.

The workflow streams newline-terminated ``data: {json}`` lines. There is
no terminal frame: the stream ends when the transport closes.
"""

import codecs
import logging
from collections.abc import AsyncIterable, Callable
from enum import Enum

from src.client.errors import FrameDecodeError
from src.client.frames import decode_frame, parse_data_line
from src.client.line_buffer import LineBuffer

logger = logging.getLogger(__name__)


class ReassemblerState(str, Enum):
    """Lifecycle of a reassembly run."""

    READING = "reading"
    DONE = "done"


class StreamReassembler:
    """Pulls chunks from a stream and emits each frame's text in order.

    Bytes are decoded incrementally, so a multi-byte character split
    across chunks survives. A frame that fails to decode is logged and
    skipped; the stream keeps going.
    """

    def __init__(
        self,
        on_text: Callable[[str], None],
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the reassembler.

        Args:
            on_text: Called once per frame carrying text, in stream order.
            encoding: Charset used to decode byte chunks.
        """
        self._on_text = on_text
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._lines = LineBuffer()
        self._parts: list[str] = []
        self.state = ReassemblerState.READING
        self.skipped_frames = 0

    @property
    def text(self) -> str:
        """Text emitted so far."""
        return "".join(self._parts)

    def feed(self, chunk: bytes | str) -> None:
        """Process one chunk of the stream."""
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        for line in self._lines.push(chunk):
            self._handle_line(line)

    def _handle_line(self, line: str) -> None:
        payload = parse_data_line(line)
        if payload is None:
            return

        try:
            frame = decode_frame(payload)
        except FrameDecodeError as e:
            self.skipped_frames += 1
            logger.warning(f"Failed to parse stream data chunk: {e.payload!r}")
            return

        if frame.text:
            self._parts.append(frame.text)
            self._on_text(frame.text)

    def _finish(self) -> None:
        self._lines.push(self._decoder.decode(b"", final=True))
        remainder = self._lines.clear()
        if remainder.strip():
            logger.debug(f"Discarding unterminated stream remainder: {remainder!r}")
        self.state = ReassemblerState.DONE

    async def run(self, source: AsyncIterable[bytes | str]) -> str:
        """Consume the source until it is exhausted.

        Errors raised by the source propagate after the reassembler has
        moved to DONE.

        Args:
            source: Async iterable of byte or text chunks.

        Returns:
            The concatenated text of all frames.
        """
        try:
            async for chunk in source:
                self.feed(chunk)
        finally:
            self._finish()
        return self.text

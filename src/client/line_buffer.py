"""Line accumulation for chunked text streams."""

LINE_TERMINATOR = "\n"


class LineBuffer:
    """Turns arbitrarily split text chunks into complete lines.

    Whatever follows the last terminator is held back until a later chunk
    completes it. Lines are returned without the terminator.
    """

    def __init__(self) -> None:
        self._remainder = ""

    @property
    def remainder(self) -> str:
        """Unterminated text received so far."""
        return self._remainder

    def push(self, chunk: str) -> list[str]:
        if not chunk:
            return []

        data = self._remainder + chunk
        *lines, self._remainder = data.split(LINE_TERMINATOR)
        return lines

    def clear(self) -> str:
        """Drop and return the held fragment."""
        remainder, self._remainder = self._remainder, ""
        return remainder

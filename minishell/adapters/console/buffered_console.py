"""
In-memory console adapters used by the HTTP API and non-interactive runs.
"""

import io
from collections import deque
from typing import Iterable, Optional, TextIO

from typing_extensions import override

from minishell.ports.console.input_port import LineReaderPort
from minishell.ports.console.output_port import OutputPort


class BufferedOutput(OutputPort):
    """Collects everything written into a string buffer."""

    def __init__(self):
        self._buffer = io.StringIO()

    @override
    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def clear(self) -> None:
        self._buffer = io.StringIO()


class ScriptedLineReader(LineReaderPort):
    """Serves a fixed sequence of lines, then reports end of input."""

    def __init__(self, lines: Iterable[str] = ()):
        self._lines: deque[str] = deque(lines)

    @override
    def read_line(self, prompt: str = "") -> Optional[str]:
        if not self._lines:
            return None
        return self._lines.popleft().rstrip("\r\n")

    def remaining(self) -> int:
        return len(self._lines)


class StreamLineReader(LineReaderPort):
    """Reads lines lazily from a text stream such as a piped stdin."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    @override
    def read_line(self, prompt: str = "") -> Optional[str]:
        line = self._stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

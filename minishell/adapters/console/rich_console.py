"""
Console adapters backed by a rich Console.
"""

from typing import Optional

from rich.console import Console
from typing_extensions import override

from minishell.ports.console.input_port import LineReaderPort
from minishell.ports.console.output_port import OutputPort


class RichConsoleOutput(OutputPort):
    """Writes command output to the terminal without markup interpretation."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(highlight=False, soft_wrap=True)

    @override
    def write(self, text: str) -> None:
        # Console.out skips markup and emoji so file content is shown verbatim
        self._console.out(text, end="", highlight=False)


class RichConsoleReader(LineReaderPort):
    """Reads lines from the terminal through rich's prompt handling."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(highlight=False, soft_wrap=True)

    @override
    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return self._console.input(prompt, markup=False, emoji=False)
        except EOFError:
            return None

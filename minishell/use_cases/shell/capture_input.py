"""
Use case for capturing multi-line text typed by the user.
"""

import logging
from typing import Optional

from minishell.entities.command import ShellContext


class CaptureInputUseCase:
    """
    Read lines until a sentinel line, owning the input stream meanwhile.

    The sentinel is compared ignoring case only; surrounding spaces make a
    line ordinary text. End of input also ends the capture.
    """

    def __init__(self, sentinel: str = "exit", logger: Optional[logging.Logger] = None):
        self._sentinel = sentinel.lower()
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, context: ShellContext, banner: str) -> str:
        """
        Capture lines from the context's reader.

        Args:
            context: Shell context providing the reader and output
            banner: Instruction line written before reading

        Returns:
            Captured lines, each terminated by a newline
        """
        context.output.write(f"{banner}\n")
        lines: list[str] = []
        while True:
            line = context.reader.read_line()
            if line is None:
                self._logger.debug("Input ended before the capture sentinel")
                break
            if line.lower() == self._sentinel:
                break
            lines.append(line)
        self._logger.debug(f"Captured {len(lines)} lines")
        return "".join(f"{line}\n" for line in lines)

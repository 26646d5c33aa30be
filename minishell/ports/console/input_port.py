"""
Input port interface for reading user lines.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LineReaderPort(ABC):
    """Port interface for reading lines of user input."""

    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """
        Read one line of input, without its trailing newline.

        Args:
            prompt: Prompt to show before reading (may be empty)

        Returns:
            The line, or None when the input is exhausted
        """
        pass

"""
Output port interface for text written to the user.
"""

from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Port interface for the user-visible output stream."""

    @abstractmethod
    def write(self, text: str) -> None:
        """
        Write text verbatim; no newline is added.

        Args:
            text: Text to write
        """
        pass

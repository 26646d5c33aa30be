"""
Directory entry domain entity.
"""

import os

from minishell.exceptions import FileSystemError


class Entry:
    """
    Directory listing entry (file or directory).
    """

    def __init__(self, path: str):
        """
        Initialize the Entry entity.

        Args:
            path: Path to the file or directory

        Raises:
            FileSystemError: If path is empty or does not exist
        """
        if not path or not isinstance(path, str):
            raise FileSystemError("Path must be a non-empty string")

        if not os.path.lexists(path):
            raise FileSystemError(f"Path does not exist: {path}")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_dir = os.path.isdir(self.path)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def has_extension(self) -> bool:
        """True when the name contains a dot anywhere (dotfiles included)."""
        return "." in self.name

    def __str__(self) -> str:
        """String representation of the Entry."""
        kind = "directory" if self.is_dir else "file"
        return f"Entry(name='{self.name}', type='{kind}')"

    def __repr__(self) -> str:
        """Detailed string representation of the Entry."""
        return f"Entry(path='{self.path}')"

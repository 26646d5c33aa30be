"""
File system port interface defining the contract for filesystem primitives.
"""

from abc import ABC, abstractmethod
from enum import Enum

from minishell.entities.entry import Entry


class CreateFileOutcome(Enum):
    """Result of creating an empty file."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    IO_ERROR = "io_error"


class RemoveDirectoryOutcome(Enum):
    """Result of removing a directory that must be empty."""

    REMOVED = "removed"
    NOT_FOUND = "not_found"
    NOT_EMPTY = "not_empty"
    IO_ERROR = "io_error"


class FileSystemPort(ABC):
    """Port interface for filesystem operations.

    All paths given to the port are already resolved against the session's
    current directory.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the entries of a directory, in no particular order.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities

        Raises:
            FileSystemError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> bool:
        """
        Create a single directory; the parent must exist.

        Returns:
            True if the directory was created
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> CreateFileOutcome:
        """Create an empty file unless something already exists at path."""
        pass

    @abstractmethod
    def remove_file(self, path: str) -> bool:
        """
        Remove a regular file.

        Returns:
            True if the file was removed
        """
        pass

    @abstractmethod
    def remove_directory_if_empty(self, path: str) -> RemoveDirectoryOutcome:
        """Remove a directory only if it has no entries."""
        pass

    @abstractmethod
    def remove_directory_recursive(self, path: str) -> bool:
        """
        Remove a directory and everything below it (a plain file is removed too).

        Returns:
            True if everything was removed
        """
        pass

    @abstractmethod
    def read_all_text(self, path: str) -> str:
        """
        Read a whole file as text.

        Raises:
            PathNotFoundError: If the file does not exist
            FileSystemError: If the file cannot be read
        """
        pass

    @abstractmethod
    def write_all_text(self, path: str, text: str, append: bool = False) -> None:
        """
        Write text to a file, truncating it or appending to it.

        The file is created when missing.

        Raises:
            FileSystemError: If the write fails
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> str:
        """
        Copy a file or a directory tree.

        When destination is an existing directory the source is copied into it,
        keeping its base name.

        Returns:
            The final destination path

        Raises:
            PathNotFoundError: If the source does not exist
            FileSystemError: If the copy fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> str:
        """
        Move a file or directory, with the same destination rule as copy.

        Falls back to copy-then-delete when a rename is not possible.

        Returns:
            The final destination path

        Raises:
            PathNotFoundError: If the source does not exist
            FileSystemError: If the move fails
        """
        pass

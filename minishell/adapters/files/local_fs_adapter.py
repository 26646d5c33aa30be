"""
Local file system adapter implementation for filesystem primitives.
"""

import logging
import os
import shutil

from typing_extensions import override

from minishell.entities.entry import Entry
from minishell.exceptions import FileSystemError, PathNotFoundError
from minishell.ports.files.file_system_port import (
    CreateFileOutcome,
    FileSystemPort,
    RemoveDirectoryOutcome,
)


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            FileSystemError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise PathNotFoundError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileSystemError(f"Path is not a directory: {directory}")

    def _create_entries(self, paths: list[str]) -> list[Entry]:
        """
        Create Entry entities from a list of paths.

        Paths that vanish between listing and inspection are skipped.
        """
        entries: list[Entry] = []
        for path in paths:
            try:
                entries.append(Entry(path))
            except FileSystemError as e:
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue
        return entries

    def _destination_for(self, source: str, destination: str) -> str:
        """Copy/move into an existing directory keeps the source base name."""
        if os.path.isdir(destination):
            return os.path.join(destination, os.path.basename(os.path.normpath(source)))
        return destination

    @staticmethod
    def _is_within(path: str, parent: str) -> bool:
        path = os.path.abspath(path)
        parent = os.path.abspath(parent)
        try:
            return os.path.commonpath([path, parent]) == parent
        except ValueError:
            return False

    def _ensure_parent(self, path: str) -> None:
        parent = os.path.dirname(os.path.abspath(path))
        if parent:
            os.makedirs(parent, exist_ok=True)

    def _copy_tree(self, source: str, destination: str) -> None:
        """Copy a directory tree using an explicit stack of directory pairs."""
        pending: list[tuple[str, str]] = [(source, destination)]
        while pending:
            src_dir, dst_dir = pending.pop()
            os.makedirs(dst_dir, exist_ok=True)
            for name in os.listdir(src_dir):
                src_path = os.path.join(src_dir, name)
                dst_path = os.path.join(dst_dir, name)
                if os.path.isdir(src_path) and not os.path.islink(src_path):
                    pending.append((src_path, dst_path))
                else:
                    shutil.copyfile(src_path, dst_path)

    def _delete_tree(self, root: str) -> None:
        """Delete files first, then directories deepest-first, without recursion."""
        pending: list[str] = [root]
        directories: list[str] = []
        while pending:
            current = pending.pop()
            if os.path.isdir(current) and not os.path.islink(current):
                directories.append(current)
                pending.extend(os.path.join(current, name) for name in os.listdir(current))
            else:
                os.remove(current)
        for directory in reversed(directories):
            os.rmdir(directory)

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List the entries of a directory.

        Raises:
            FileSystemError: If listing fails
        """
        try:
            self._validate_directory(directory)
            paths = [os.path.join(directory, name) for name in os.listdir(directory)]
            return self._create_entries(paths)
        except FileSystemError:
            raise
        except OSError as e:
            raise FileSystemError(f"Failed to list entries in {directory}: {str(e)}")

    @override
    def create_directory(self, path: str) -> bool:
        try:
            os.mkdir(path)
            return True
        except OSError as e:
            self._logger.warning(f"Could not create directory {path}: {e}")
            return False

    @override
    def create_file(self, path: str) -> CreateFileOutcome:
        if os.path.lexists(path):
            return CreateFileOutcome.ALREADY_EXISTS
        try:
            with open(path, "x", encoding="utf-8"):
                pass
            return CreateFileOutcome.CREATED
        except FileExistsError:
            return CreateFileOutcome.ALREADY_EXISTS
        except OSError as e:
            self._logger.warning(f"Could not create file {path}: {e}")
            return CreateFileOutcome.IO_ERROR

    @override
    def remove_file(self, path: str) -> bool:
        if not (os.path.isfile(path) or os.path.islink(path)):
            return False
        try:
            os.remove(path)
            return True
        except OSError as e:
            self._logger.warning(f"Could not remove file {path}: {e}")
            return False

    @override
    def remove_directory_if_empty(self, path: str) -> RemoveDirectoryOutcome:
        if not os.path.isdir(path):
            return RemoveDirectoryOutcome.NOT_FOUND
        try:
            if os.listdir(path):
                return RemoveDirectoryOutcome.NOT_EMPTY
            os.rmdir(path)
            return RemoveDirectoryOutcome.REMOVED
        except OSError as e:
            self._logger.warning(f"Could not remove directory {path}: {e}")
            return RemoveDirectoryOutcome.IO_ERROR

    @override
    def remove_directory_recursive(self, path: str) -> bool:
        if not os.path.lexists(path):
            return False
        try:
            self._delete_tree(path)
            return True
        except OSError as e:
            self._logger.warning(f"Could not remove tree {path}: {e}")
            return False

    @override
    def read_all_text(self, path: str) -> str:
        """
        Read a whole file as UTF-8 text; undecodable bytes are replaced.

        Raises:
            PathNotFoundError: If the file does not exist
            FileSystemError: If the path is a directory or cannot be read
        """
        if not os.path.exists(path):
            raise PathNotFoundError(f"File does not exist: {path}")
        if os.path.isdir(path):
            raise FileSystemError(f"Path is a directory: {path}")
        try:
            with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
                return f.read()
        except OSError as e:
            raise FileSystemError(str(e))

    @override
    def write_all_text(self, path: str, text: str, append: bool = False) -> None:
        mode = "a" if append else "w"
        try:
            with open(path, mode, encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            self._logger.error(f"Error writing to {path}: {e}")
            raise FileSystemError(str(e))

    @override
    def copy(self, source: str, destination: str) -> str:
        if not os.path.lexists(source):
            raise PathNotFoundError(f"Source does not exist: {source}")
        target = self._destination_for(source, destination)
        try:
            if os.path.isdir(source):
                if self._is_within(target, source):
                    raise FileSystemError(
                        f"Cannot copy a directory into itself: {source}"
                    )
                self._ensure_parent(target)
                self._copy_tree(source, target)
            else:
                self._ensure_parent(target)
                shutil.copyfile(source, target)
            return target
        except FileSystemError:
            raise
        except OSError as e:
            self._logger.error(f"Error copying {source} to {target}: {e}")
            raise FileSystemError(str(e))

    @override
    def move(self, source: str, destination: str) -> str:
        if not os.path.lexists(source):
            raise PathNotFoundError(f"Source does not exist: {source}")
        target = self._destination_for(source, destination)
        if os.path.isdir(source) and self._is_within(target, source):
            raise FileSystemError(f"Cannot move a directory into itself: {source}")
        try:
            self._ensure_parent(target)
            os.rename(source, target)
            return target
        except OSError as e:
            self._logger.info(f"Rename of {source} failed ({e}); copying instead")

        try:
            if os.path.isdir(source) and not os.path.islink(source):
                self._copy_tree(source, target)
            else:
                shutil.copyfile(source, target)
        except OSError as e:
            self._logger.error(f"Error moving {source} to {target}: {e}")
            raise FileSystemError(str(e))

        if not self.remove_directory_recursive(source):
            raise FileSystemError(f"Copied but failed to remove source: {source}")
        return target

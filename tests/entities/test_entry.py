"""
Tests for the Entry entity.
"""

import os

import pytest

from minishell.entities.entry import Entry
from minishell.exceptions import FileSystemError


class TestEntry:
    """Test cases for the Entry entity."""

    def test_entry_for_file(self, temp_directory: str):
        """Test Entry initialization with a regular file."""
        entry = Entry(os.path.join(temp_directory, "test1.txt"))

        assert entry.name == "test1.txt"
        assert entry.is_dir is False
        assert entry.has_extension is True
        assert entry.is_hidden is False

    def test_entry_for_directory(self, temp_directory: str):
        """Test Entry initialization with a directory."""
        entry = Entry(os.path.join(temp_directory, "subdir"))

        assert entry.is_dir is True
        assert entry.name == "subdir"
        assert str(entry) == "Entry(name='subdir', type='directory')"

    def test_hidden_entry(self, temp_directory: str):
        """Test that dotfiles are hidden and count as having an extension."""
        path = os.path.join(temp_directory, ".hidden")
        open(path, "w").close()
        entry = Entry(path)

        assert entry.is_hidden is True
        assert entry.has_extension is True

    def test_entry_with_empty_path(self):
        """Test Entry initialization with an empty path."""
        with pytest.raises(FileSystemError, match="Path must be a non-empty string"):
            Entry("")

    def test_entry_with_nonexistent_path(self):
        """Test Entry initialization with a missing path."""
        with pytest.raises(FileSystemError, match="Path does not exist"):
            Entry("/nonexistent/path/file.txt")

    def test_string_representations(self, temp_directory: str):
        """Test __str__ and __repr__."""
        entry = Entry(os.path.join(temp_directory, "test2.py"))

        assert str(entry) == "Entry(name='test2.py', type='file')"
        assert repr(entry) == f"Entry(path='{os.path.join(temp_directory, 'test2.py')}')"

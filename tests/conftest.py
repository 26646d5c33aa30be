"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from minishell.adapters.console.buffered_console import BufferedOutput, ScriptedLineReader
from minishell.container import DependencyContainer
from minishell.entities.session import Session


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def empty_directory():
    """
    Create an empty temporary directory.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


class ShellHarness:
    """Drive an interpreter line by line and collect what it prints."""

    def __init__(self, container: DependencyContainer, directory: str):
        self.session = Session(current_directory=directory)
        self.output = BufferedOutput()
        self.reader = ScriptedLineReader()
        self.interpreter = container.create_interpreter(
            self.session, self.output, self.reader
        )

    @property
    def directory(self) -> str:
        return self.session.current_directory

    def run(self, line: str, input_lines: list[str] | None = None) -> str:
        """Run one line and return only what that line printed."""
        self.output.clear()
        self.reader = ScriptedLineReader(input_lines or [])
        self.interpreter.context.reader = self.reader
        self.interpreter.process_line(line)
        return self.output.getvalue()


@pytest.fixture
def shell(dependency_container, empty_directory):
    """
    Create a shell harness whose session starts in an empty directory.

    Returns:
        ShellHarness instance
    """
    return ShellHarness(dependency_container, empty_directory)

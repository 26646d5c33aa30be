"""
Custom exceptions for the application.
"""


class BaseShellError(Exception):
    """Base exception class for shell errors."""

    pass


class FileSystemError(BaseShellError):
    """Exception raised for filesystem access errors."""

    pass


class PathNotFoundError(FileSystemError):
    """Exception raised when a referenced file or directory does not exist."""

    pass


class PipelineSyntaxError(BaseShellError):
    """Exception raised when an input line cannot be turned into a pipeline."""

    pass


class ConfigurationError(BaseShellError):
    """Exception raised for configuration errors."""

    pass


class SessionNotFoundError(BaseShellError):
    """Exception raised when a session id is unknown to the session store."""

    pass

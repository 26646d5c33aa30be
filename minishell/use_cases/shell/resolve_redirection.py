"""
Use case for sending a pipeline's output into a file.
"""

import logging
from typing import Optional

from minishell.entities.pipeline import Redirection, RedirectMode
from minishell.entities.session import Session
from minishell.exceptions import FileSystemError
from minishell.ports.files.file_system_port import FileSystemPort


class RedirectionResolver:
    """Writes or appends content to a file resolved against the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the resolver.

        Args:
            file_system: Filesystem primitives used for the write
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def resolve(
        self, redirection: Redirection, content: Optional[str], session: Session
    ) -> str:
        """
        Apply a redirection to the output of its command.

        Args:
            redirection: Target file and mode
            content: Output of the redirected command, None when there was none
            session: Session whose current directory anchors the target

        Returns:
            Status line; the caller does not print it
        """
        return self.write(session, redirection.target, content or "", redirection.mode)

    def write(
        self, session: Session, target: str, content: str, mode: RedirectMode
    ) -> str:
        """
        Overwrite or append content to target.

        Returns:
            Human-readable status line
        """
        path = session.resolve(target)
        try:
            self._file_system.write_all_text(path, content, append=mode.append)
        except FileSystemError as e:
            self._logger.warning(f"Redirection to {path} failed: {e}")
            if mode.append:
                return f"Failed to append to file: {e}\n"
            return f"Failed to write to file: {e}\n"

        self._logger.debug(f"Wrote {len(content)} characters to {path} ({mode.name})")
        if mode.append:
            return f"Content appended to {target}\n"
        return f"Content written to {target}\n"

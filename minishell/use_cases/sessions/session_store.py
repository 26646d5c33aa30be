"""
In-process store of independent shell sessions.
"""

import logging
from typing import Optional

from minishell.entities.session import Session
from minishell.exceptions import SessionNotFoundError


class SessionStore:
    """Keeps sessions by id so several of them can be driven independently."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._sessions: dict[str, Session] = {}
        self._logger = logger or logging.getLogger(__name__)

    def create(self, directory: str) -> Session:
        """
        Create a session rooted at an existing absolute directory.

        Args:
            directory: Initial current directory

        Returns:
            The new session
        """
        session = Session(current_directory=directory)
        self._sessions[session.session_id] = session
        self._logger.info(f"Created session {session.session_id} in {directory}")
        return session

    def get(self, session_id: str) -> Session:
        """
        Look up a session.

        Raises:
            SessionNotFoundError: If no session has this id
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return session

    def close(self, session_id: str) -> None:
        """
        Forget a session.

        Raises:
            SessionNotFoundError: If no session has this id
        """
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        self._logger.info(f"Closed session {session_id}")

    def __len__(self) -> int:
        return len(self._sessions)

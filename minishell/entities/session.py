"""
Session domain entity.
"""

import os
import uuid
from dataclasses import dataclass, field


@dataclass
class Session:
    """
    Interpreter session holding the current directory.

    The current directory lives here rather than in the process working
    directory, so several sessions can coexist in one process. Only the
    ``cd`` command assigns ``current_directory``.
    """

    current_directory: str
    running: bool = True
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def resolve(self, path: str) -> str:
        """
        Resolve a path against the current directory.

        Args:
            path: Relative or absolute path given by the user

        Returns:
            The joined path (absolute paths are returned unchanged)
        """
        return os.path.join(self.current_directory, path)

    def terminate(self) -> None:
        """Mark the session as finished; the interpreter loop stops after this."""
        self.running = False

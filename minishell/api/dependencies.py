"""
FastAPI dependency functions for retrieving services from the container.
"""

from minishell.container import container
from minishell.use_cases.sessions.session_store import SessionStore


def get_session_store() -> SessionStore:
    """
    Get the session store from the container.

    Returns:
        SessionStore: The session store instance
    """
    return container.get_session_store()

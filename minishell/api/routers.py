"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Response

from minishell.adapters.console.buffered_console import BufferedOutput, ScriptedLineReader
from minishell.api.dependencies import get_session_store
from minishell.api.schemas import (
    CommandRequest,
    CommandResponse,
    CreateSessionRequest,
    ErrorResponse,
    SessionResponse,
)
from minishell.config.settings import settings
from minishell.container import container
from minishell.exceptions import ConfigurationError, SessionNotFoundError

router = APIRouter()


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def create_session(body: CreateSessionRequest):
    """
    Create a session.

    Args:
        body: Optional initial directory

    Returns:
        SessionResponse: The new session

    Raises:
        HTTPException: If the directory does not exist
    """
    try:
        directory = settings.get_start_directory(body.directory)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    session = get_session_store().create(directory)
    return SessionResponse.from_entity(session)


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_session(session_id: str):
    """
    Describe a session.

    Raises:
        HTTPException: If the session does not exist
    """
    try:
        session = get_session_store().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionResponse.from_entity(session)


@router.post(
    "/sessions/{session_id}/commands",
    response_model=CommandResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def run_command(session_id: str, body: CommandRequest):
    """
    Run one input line in a session.

    Args:
        session_id: Session to run in
        body: The line, plus lines for interactive capture

    Returns:
        CommandResponse: Console output and the session state afterwards

    Raises:
        HTTPException: If the session does not exist or has exited
    """
    try:
        session = get_session_store().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if not session.running:
        raise HTTPException(status_code=409, detail="Session has been terminated")

    output = BufferedOutput()
    interpreter = container.create_interpreter(
        session, output, ScriptedLineReader(body.input_lines)
    )
    interpreter.process_line(body.line)
    return CommandResponse(
        output=output.getvalue(),
        current_directory=session.current_directory,
        running=session.running,
    )


@router.delete(
    "/sessions/{session_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
def close_session(session_id: str):
    """
    Close a session.

    Raises:
        HTTPException: If the session does not exist
    """
    try:
        get_session_store().close(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)

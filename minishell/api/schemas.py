"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from minishell.entities.session import Session


class CreateSessionRequest(BaseModel):
    """Schema for session creation."""

    directory: Optional[str] = Field(
        None, description="Initial current directory (default: configured start directory)"
    )


class SessionResponse(BaseModel):
    """Schema describing a session."""

    session_id: str = Field(..., description="Session identifier")
    current_directory: str = Field(..., description="Session's current directory")
    running: bool = Field(..., description="False once 'exit' has been run")

    @classmethod
    def from_entity(cls, session: Session):
        """Create a SessionResponse schema from a Session entity."""
        return cls(
            session_id=session.session_id,
            current_directory=session.current_directory,
            running=session.running,
        )


class CommandRequest(BaseModel):
    """Schema for running one input line."""

    line: str = Field(..., description="Command or pipeline, e.g. 'ls -r | cat'")
    input_lines: List[str] = Field(
        default_factory=list,
        description="Lines served to interactive capture ('cat > file', bare 'cat')",
    )


class CommandResponse(BaseModel):
    """Schema for the result of one input line."""

    output: str = Field(..., description="Everything the line wrote to the console")
    current_directory: str = Field(..., description="Current directory afterwards")
    running: bool = Field(..., description="False once 'exit' has been run")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")

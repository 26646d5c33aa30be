"""
Command domain entities shared by the registry, the handlers and the executor.
"""

from dataclasses import dataclass, field
from typing import Optional, TypedDict

from minishell.entities.session import Session
from minishell.ports.console.input_port import LineReaderPort
from minishell.ports.console.output_port import OutputPort


class CommandSpec(TypedDict):
    """Specification for a command exposed by a commands handler."""

    name: str
    usage: str
    description: str


@dataclass(frozen=True)
class CommandResult:
    """
    Output of one stage.

    ``text`` is forwarded to the next stage or printed; ``None`` means there is
    nothing to forward or print. ``terminate`` ends the session.
    """

    text: Optional[str] = None
    terminate: bool = False

    @classmethod
    def exit(cls) -> "CommandResult":
        return cls(text=None, terminate=True)


@dataclass
class ShellContext:
    """Everything a command may touch: the session and the console streams."""

    session: Session
    output: OutputPort
    reader: LineReaderPort


@dataclass(frozen=True)
class CommandInvocation:
    """A single dispatch of a command within a pipeline."""

    context: ShellContext
    name: str
    args: list[str] = field(default_factory=list)
    piped_input: Optional[str] = None

    @property
    def session(self) -> Session:
        return self.context.session

"""
Commands reading and writing file content: cat, > and >>.
"""

import io
import logging
from typing import Callable, Optional

from typing_extensions import override

from minishell.entities.command import CommandInvocation, CommandResult, CommandSpec
from minishell.entities.pipeline import RedirectMode
from minishell.exceptions import FileSystemError, PathNotFoundError
from minishell.ports.commands.commands_port import CommandsHandlerPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.shell.capture_input import CaptureInputUseCase
from minishell.use_cases.shell.resolve_redirection import RedirectionResolver

CAT_CAPTURE_BANNER = "Enter text (type 'exit' to finish input):"


class ContentCommandsHandler(CommandsHandlerPort):
    """Handler for displaying file content and writing literal text to files."""

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: RedirectionResolver,
        capture: CaptureInputUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the content commands handler.

        Args:
            file_system: Filesystem primitives
            resolver: Writer shared with trailing redirections
            capture: Interactive capture used by a bare 'cat'
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._resolver = resolver
        self._capture = capture
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[CommandInvocation], CommandResult]] = {
            "cat": self._handle_cat,
            ">": self._handle_write,
            ">>": self._handle_append,
        }

    @override
    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "cat",
                "usage": "cat <file_name>",
                "description": "Displays contents of a file.",
            },
            {
                "name": ">",
                "usage": "> <file_name> <text>",
                "description": "Redirects output to a file (overwrites).",
            },
            {
                "name": ">>",
                "usage": ">> <file_name> <text>",
                "description": "Appends text to a file.",
            },
        ]

    @override
    def dispatch(self, invocation: CommandInvocation) -> CommandResult:
        handler = self._handlers.get(invocation.name)
        if handler is None:
            raise ValueError(f"Unknown command: {invocation.name}")
        return handler(invocation)

    def _display_file(self, invocation: CommandInvocation, name: str) -> str:
        try:
            text = self._file_system.read_all_text(invocation.session.resolve(name))
        except PathNotFoundError:
            return f"File not found: {name}\n"
        except FileSystemError as e:
            return f"Error reading file: {e}\n"
        # Lines end only at \n, \r or \r\n; each comes back newline-terminated.
        lines = io.StringIO(text, newline=None)
        return "".join(line if line.endswith("\n") else f"{line}\n" for line in lines)

    def _handle_cat(self, invocation: CommandInvocation) -> CommandResult:
        """
        Display files, pass piped input through, or capture typed text.

        With file arguments the piped input is ignored.
        """
        if invocation.args:
            return CommandResult(
                "".join(self._display_file(invocation, name) for name in invocation.args)
            )
        if invocation.piped_input is not None:
            return CommandResult(invocation.piped_input)
        return CommandResult(self._capture.execute(invocation.context, CAT_CAPTURE_BANNER))

    def _handle_write(self, invocation: CommandInvocation) -> CommandResult:
        if len(invocation.args) < 2:
            return CommandResult("Usage: > <file_name> <text_to_write>\n")
        target, *words = invocation.args
        return CommandResult(
            self._resolver.write(
                invocation.session, target, " ".join(words), RedirectMode.OVERWRITE
            )
        )

    def _handle_append(self, invocation: CommandInvocation) -> CommandResult:
        """Append piped input verbatim, or else the remaining tokens joined by spaces."""
        if not invocation.args:
            return CommandResult("Usage: >> <file_name> [<text_to_append>]\n")
        target, *words = invocation.args
        if invocation.piped_input is not None:
            content = invocation.piped_input
        else:
            content = " ".join(words)
        return CommandResult(
            self._resolver.write(invocation.session, target, content, RedirectMode.APPEND)
        )

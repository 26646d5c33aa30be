"""
Commands "pwd" and "cd": reading and changing the session's current directory.
"""

import logging
import os
from typing import Callable, Optional

from typing_extensions import override

from minishell.entities.command import CommandInvocation, CommandResult, CommandSpec
from minishell.ports.commands.commands_port import CommandsHandlerPort
from minishell.ports.files.file_system_port import FileSystemPort


class NavigationCommandsHandler(CommandsHandlerPort):
    """Handler for the commands that read or mutate the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[CommandInvocation], CommandResult]] = {
            "pwd": self._handle_pwd,
            "cd": self._handle_cd,
        }

    @override
    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "pwd",
                "usage": "pwd",
                "description": "Prints the current working directory.",
            },
            {
                "name": "cd",
                "usage": "cd <directory>",
                "description": "Changes the current directory.",
            },
        ]

    @override
    def dispatch(self, invocation: CommandInvocation) -> CommandResult:
        handler = self._handlers.get(invocation.name)
        if handler is None:
            raise ValueError(f"Unknown command: {invocation.name}")
        return handler(invocation)

    def _handle_pwd(self, invocation: CommandInvocation) -> CommandResult:
        return CommandResult(f"{invocation.session.current_directory}\n")

    def _handle_cd(self, invocation: CommandInvocation) -> CommandResult:
        """
        Change directory.

        Diagnostics go straight to the output port so they are shown even when
        cd sits inside a pipeline or a redirection.
        """
        output = invocation.context.output
        if len(invocation.args) != 1:
            output.write("Usage: cd <directory>\n")
            return CommandResult("")

        session = invocation.session
        path = invocation.args[0]
        if path == ".":
            return CommandResult("")
        if path == "..":
            # dirname of the root is the root itself
            session.current_directory = os.path.dirname(session.current_directory)
        else:
            candidate = session.resolve(path)
            if not self._file_system.is_directory(candidate):
                output.write(f"Directory not found: {path}\n")
                return CommandResult("")
            session.current_directory = os.path.abspath(candidate)

        self._logger.debug(f"Current directory is now {session.current_directory}")
        return CommandResult("")

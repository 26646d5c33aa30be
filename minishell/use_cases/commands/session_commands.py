"""
Commands "help" and "exit".
"""

import logging
from typing import Callable, Optional

from typing_extensions import override

from minishell.entities.command import CommandInvocation, CommandResult, CommandSpec
from minishell.ports.commands.commands_port import CommandsHandlerPort

# Syntax that is not a dispatchable command but belongs in the help text.
SYNTAX_HELP: list[CommandSpec] = [
    {
        "name": "cat >",
        "usage": "cat > <file_name>",
        "description": "Writes typed lines to a file ('cat >>' appends).",
    },
    {
        "name": "|",
        "usage": "| <command1> | <command2>",
        "description": "Pipes the output of command1 into command2.",
    },
]


def format_help(specs: list[CommandSpec]) -> str:
    lines = ["Available commands:\n"]
    lines.extend(f"{spec['usage']:<24} - {spec['description']}\n" for spec in specs)
    return "".join(lines)


class SessionCommandsHandler(CommandsHandlerPort):
    """Handler for the commands that describe or end the session."""

    def __init__(
        self,
        commands_provider: Callable[[], list[CommandSpec]],
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session commands handler.

        Args:
            commands_provider: Returns every registered command, for the help text
            logger: Logger instance to use for logging
        """
        self._commands_provider = commands_provider
        self._logger = logger or logging.getLogger(__name__)

    @override
    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "help",
                "usage": "help",
                "description": "Shows this list of commands.",
            },
            {
                "name": "exit",
                "usage": "exit",
                "description": "Exits the command line.",
            },
        ]

    @override
    def dispatch(self, invocation: CommandInvocation) -> CommandResult:
        if invocation.name == "help":
            return CommandResult(format_help(self._commands_provider() + SYNTAX_HELP))
        if invocation.name == "exit":
            self._logger.info(f"Session {invocation.session.session_id} exiting")
            invocation.session.terminate()
            return CommandResult.exit()
        raise ValueError(f"Unknown command: {invocation.name}")

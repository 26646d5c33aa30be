"""
Command registry: maps command names to the handler group implementing them.
"""

import logging
from dataclasses import replace
from typing import Optional

from minishell.entities.command import CommandInvocation, CommandResult, CommandSpec
from minishell.ports.commands.commands_port import CommandsHandlerPort


class CommandRegistry:
    """Combine several command handlers into one name-keyed dispatch table."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._handlers: list[CommandsHandlerPort] = []
        self._table: dict[str, CommandsHandlerPort] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, handler: CommandsHandlerPort) -> None:
        """
        Register every command of a handler.

        Raises:
            ValueError: If a command name is already registered
        """
        for spec in handler.available_commands():
            name = spec["name"].lower()
            if name in self._table:
                raise ValueError(f"Command already registered: {name}")
            self._table[name] = handler
        self._handlers.append(handler)

    def available_commands(self) -> list[CommandSpec]:
        commands: list[CommandSpec] = []
        for handler in self._handlers:
            commands.extend(handler.available_commands())
        return commands

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._table

    def dispatch(self, invocation: CommandInvocation) -> CommandResult:
        """
        Dispatch an invocation to the handler that owns its command name.

        Unknown names produce a text result instead of an error so the rest of
        the pipeline still runs.
        """
        name = invocation.name.lower()
        handler = self._table.get(name)
        if handler is None:
            self._logger.debug(f"Unknown command: {invocation.name}")
            return CommandResult(
                f"Unknown command: {invocation.name}. Type 'help' for a list of commands.\n"
            )
        self._logger.debug(f"Dispatching {name} {invocation.args}")
        return handler.dispatch(replace(invocation, name=name))

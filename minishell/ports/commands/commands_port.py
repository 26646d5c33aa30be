"""
Port for groups of shell command handlers.
"""

from abc import ABC, abstractmethod

from minishell.entities.command import CommandInvocation, CommandResult, CommandSpec


class CommandsHandlerPort(ABC):
    """
    Port interface for a group of shell commands.

    A handler exposes the commands it implements and executes invocations for them.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get the commands implemented by this handler.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, invocation: CommandInvocation) -> CommandResult:
        """
        Execute a command invocation.

        Args:
            invocation: Command name, arguments, piped input and context

        Returns:
            Result of the command

        Raises:
            ValueError: If the command name is not handled here
        """
        pass

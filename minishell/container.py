"""
Dependency injection container for managing application dependencies.
"""

import logging

from minishell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from minishell.config.settings import settings
from minishell.entities.command import ShellContext
from minishell.entities.session import Session
from minishell.ports.console.input_port import LineReaderPort
from minishell.ports.console.output_port import OutputPort
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.commands.content_commands import ContentCommandsHandler
from minishell.use_cases.commands.file_commands import FileCommandsHandler
from minishell.use_cases.commands.navigation_commands import NavigationCommandsHandler
from minishell.use_cases.commands.registry import CommandRegistry
from minishell.use_cases.commands.session_commands import SessionCommandsHandler
from minishell.use_cases.sessions.session_store import SessionStore
from minishell.use_cases.shell.capture_input import CaptureInputUseCase
from minishell.use_cases.shell.execute_pipeline import PipelineExecutor
from minishell.use_cases.shell.interpreter import ShellInterpreter
from minishell.use_cases.shell.parse_pipeline import PipelineParser
from minishell.use_cases.shell.resolve_redirection import RedirectionResolver


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_capture_use_case(self) -> CaptureInputUseCase:
        """
        Get the interactive capture use case, configured with the sentinel line.

        Returns:
            Configured CaptureInputUseCase
        """
        if "capture_use_case" not in self._instances:
            self._instances["capture_use_case"] = CaptureInputUseCase(
                settings.capture_sentinel, self._logger
            )
        return self._instances["capture_use_case"]

    def get_redirection_resolver(self) -> RedirectionResolver:
        """
        Get redirection resolver with injected dependencies.

        Returns:
            Configured RedirectionResolver
        """
        if "redirection_resolver" not in self._instances:
            self._instances["redirection_resolver"] = RedirectionResolver(
                self.get_file_system(), self._logger
            )
        return self._instances["redirection_resolver"]

    def get_command_registry(self) -> CommandRegistry:
        """
        Get the command registry with every command group registered.

        Returns:
            Configured CommandRegistry
        """
        if "command_registry" not in self._instances:
            file_system = self.get_file_system()
            registry = CommandRegistry(self._logger)
            registry.register(NavigationCommandsHandler(file_system, self._logger))
            registry.register(FileCommandsHandler(file_system, self._logger))
            registry.register(
                ContentCommandsHandler(
                    file_system,
                    self.get_redirection_resolver(),
                    self.get_capture_use_case(),
                    self._logger,
                )
            )
            registry.register(
                SessionCommandsHandler(registry.available_commands, self._logger)
            )
            self._instances["command_registry"] = registry
        return self._instances["command_registry"]

    def get_pipeline_parser(self) -> PipelineParser:
        """
        Get pipeline parser instance.

        Returns:
            PipelineParser
        """
        if "pipeline_parser" not in self._instances:
            self._instances["pipeline_parser"] = PipelineParser(self._logger)
        return self._instances["pipeline_parser"]

    def get_pipeline_executor(self) -> PipelineExecutor:
        """
        Get pipeline executor with injected dependencies.

        Returns:
            Configured PipelineExecutor
        """
        if "pipeline_executor" not in self._instances:
            self._instances["pipeline_executor"] = PipelineExecutor(
                self.get_command_registry(),
                self.get_redirection_resolver(),
                self._logger,
            )
        return self._instances["pipeline_executor"]

    def get_session_store(self) -> SessionStore:
        """
        Get the store of sessions driven through the HTTP API.

        Returns:
            SessionStore
        """
        if "session_store" not in self._instances:
            self._instances["session_store"] = SessionStore(self._logger)
        return self._instances["session_store"]

    def create_interpreter(
        self, session: Session, output: OutputPort, reader: LineReaderPort
    ) -> ShellInterpreter:
        """
        Build an interpreter bound to one session and its console streams.

        Interpreters are not cached: each one owns its context.

        Returns:
            Configured ShellInterpreter
        """
        return ShellInterpreter(
            ShellContext(session=session, output=output, reader=reader),
            self.get_pipeline_parser(),
            self.get_pipeline_executor(),
            self.get_redirection_resolver(),
            self.get_capture_use_case(),
            self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

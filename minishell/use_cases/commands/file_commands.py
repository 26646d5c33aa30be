"""
Commands working on directory entries: ls, mkdir, rmdir, rm, touch, cp, mv.
"""

import logging
from typing import Callable, Optional

from typing_extensions import override

from minishell.entities.command import CommandInvocation, CommandResult, CommandSpec
from minishell.entities.entry import Entry
from minishell.exceptions import FileSystemError, PathNotFoundError
from minishell.ports.commands.commands_port import CommandsHandlerPort
from minishell.ports.files.file_system_port import (
    CreateFileOutcome,
    FileSystemPort,
    RemoveDirectoryOutcome,
)


class FileCommandsHandler(CommandsHandlerPort):
    """Handler for listing, creating, removing, copying and moving entries."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the file commands handler.

        Args:
            file_system: Filesystem primitives
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[CommandInvocation], CommandResult]] = {
            "ls": self._handle_ls,
            "mkdir": self._handle_mkdir,
            "rmdir": self._handle_rmdir,
            "rm": self._handle_rm,
            "touch": self._handle_touch,
            "cp": self._handle_cp,
            "mv": self._handle_mv,
        }

    @override
    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "ls",
                "usage": "ls [-a] [-r]",
                "description": "Lists files in the current directory.",
            },
            {
                "name": "mkdir",
                "usage": "mkdir <directory_name>",
                "description": "Creates a new directory.",
            },
            {
                "name": "rmdir",
                "usage": "rmdir <directory_name>",
                "description": "Removes an empty directory.",
            },
            {
                "name": "rm",
                "usage": "rm [-r] <file_name>",
                "description": "Removes a file, or a directory tree with -r.",
            },
            {
                "name": "touch",
                "usage": "touch <filename>",
                "description": "Creates a new empty file.",
            },
            {
                "name": "cp",
                "usage": "cp <source_file> <destination_file>",
                "description": "Copies a file.",
            },
            {
                "name": "mv",
                "usage": "mv <source> <destination>",
                "description": "Moves a file or directory to a new location.",
            },
        ]

    @override
    def dispatch(self, invocation: CommandInvocation) -> CommandResult:
        handler = self._handlers.get(invocation.name)
        if handler is None:
            raise ValueError(f"Unknown command: {invocation.name}")
        return handler(invocation)

    # ------------------------------ ls ------------------------------
    @staticmethod
    def _display_name(entry: Entry) -> str:
        # Extensionless files are shown with a .txt suffix; directories never are.
        if entry.is_dir or entry.has_extension:
            return entry.name
        return f"{entry.name}.txt"

    def _handle_ls(self, invocation: CommandInvocation) -> CommandResult:
        show_hidden = False
        reverse = False
        for arg in invocation.args:
            flags = arg[1:]
            if not arg.startswith("-") or not flags or set(flags) - {"a", "r"}:
                return CommandResult("Usage: ls [-a] [-r]\n")
            show_hidden = show_hidden or "a" in flags
            reverse = reverse or "r" in flags

        directory = invocation.session.current_directory
        try:
            entries = self._file_system.list_entries(directory)
        except FileSystemError as e:
            self._logger.warning(f"ls failed: {e}")
            return CommandResult(f"Cannot access directory: {directory}\n")

        entries.sort(key=lambda e: e.name, reverse=reverse)
        lines = [
            f"{self._display_name(entry)}\n"
            for entry in entries
            if show_hidden or not entry.is_hidden
        ]
        return CommandResult("".join(lines))

    # --------------------------- mkdir/rmdir ---------------------------
    def _handle_mkdir(self, invocation: CommandInvocation) -> CommandResult:
        if not invocation.args:
            return CommandResult(
                "Usage: mkdir <directory_name1> [<directory_name2> ...]\n"
            )
        out: list[str] = []
        for name in invocation.args:
            if self._file_system.create_directory(invocation.session.resolve(name)):
                out.append(f"Directory created: {name}\n")
            else:
                out.append(f"Failed to create directory: {name}\n")
        return CommandResult("".join(out))

    def _handle_rmdir(self, invocation: CommandInvocation) -> CommandResult:
        if not invocation.args:
            return CommandResult(
                "Usage: rmdir <directory_name1> [<directory_name2> ...]\n"
            )
        out: list[str] = []
        for name in invocation.args:
            outcome = self._file_system.remove_directory_if_empty(
                invocation.session.resolve(name)
            )
            if outcome is RemoveDirectoryOutcome.REMOVED:
                out.append(f"{name} Directory removed.\n")
            elif outcome is RemoveDirectoryOutcome.NOT_FOUND:
                out.append(f"{name} directory not found.\n")
            elif outcome is RemoveDirectoryOutcome.NOT_EMPTY:
                out.append(f"{name} Directory is not empty.\n")
            else:
                out.append(f"Error removing directory: {name}\n")
        return CommandResult("".join(out))

    # ------------------------------ rm ------------------------------
    def _handle_rm(self, invocation: CommandInvocation) -> CommandResult:
        args = invocation.args
        recursive = bool(args) and args[0] == "-r"
        paths = args[1:] if recursive else args
        if not paths:
            return CommandResult("Usage: rm [-r] <file/directory>\n")

        out: list[str] = []
        for path in paths:
            target = invocation.session.resolve(path)
            if recursive:
                if not self._file_system.exists(target):
                    out.append(f"Directory not found: {path}\n")
                elif self._file_system.remove_directory_recursive(target):
                    out.append(f"Removed directory and its contents: {path}\n")
                else:
                    out.append(f"Failed to remove directory: {path}\n")
            elif self._file_system.remove_file(target):
                out.append(f"File removed: {path}\n")
            else:
                out.append(f"Failed to remove file: {path}\n")
        return CommandResult("".join(out))

    # ----------------------------- touch -----------------------------
    def _handle_touch(self, invocation: CommandInvocation) -> CommandResult:
        if not invocation.args:
            return CommandResult("Usage: touch <filename> [<filename2> ...]\n")
        out: list[str] = []
        for name in invocation.args:
            outcome = self._file_system.create_file(invocation.session.resolve(name))
            if outcome is CreateFileOutcome.CREATED:
                out.append(f"File created: {name}\n")
            elif outcome is CreateFileOutcome.ALREADY_EXISTS:
                out.append(f"File already exists: {name}\n")
            else:
                out.append(f"Failed to create file: {name}\n")
        return CommandResult("".join(out))

    # ---------------------------- cp / mv ----------------------------
    def _copy_one(self, invocation: CommandInvocation, source: str, dest: str) -> str:
        session = invocation.session
        try:
            self._file_system.copy(session.resolve(source), session.resolve(dest))
            return f"Successfully copied {source} to {dest}\n"
        except PathNotFoundError:
            return f"Source file does not exist: {source}\n"
        except FileSystemError as e:
            return f"Failed to copy file: {e}\n"

    def _move_one(self, invocation: CommandInvocation, source: str, dest: str) -> str:
        session = invocation.session
        try:
            self._file_system.move(session.resolve(source), session.resolve(dest))
            return f"Successfully moved {source} to {dest}\n"
        except PathNotFoundError:
            return f"Source does not exist: {source}\n"
        except FileSystemError as e:
            return f"Failed to move file: {e}\n"

    def _handle_cp(self, invocation: CommandInvocation) -> CommandResult:
        args = invocation.args
        if len(args) < 2:
            return CommandResult("Usage: cp <source_file(s)> <destination>\n")
        if len(args) == 2:
            return CommandResult(self._copy_one(invocation, args[0], args[1]))

        *sources, dest_dir = args
        dest_path = invocation.session.resolve(dest_dir)
        if not self._file_system.exists(dest_path):
            return CommandResult(f"Destination directory does not exist: {dest_dir}\n")
        if not self._file_system.is_directory(dest_path):
            return CommandResult(
                "Destination must be a directory when copying multiple files\n"
            )
        return CommandResult(
            "".join(self._copy_one(invocation, source, dest_dir) for source in sources)
        )

    def _handle_mv(self, invocation: CommandInvocation) -> CommandResult:
        args = invocation.args
        if len(args) < 2:
            return CommandResult("Usage: mv <source(s)> <destination>\n")

        *sources, dest = args
        if len(sources) > 1 and not self._file_system.is_directory(
            invocation.session.resolve(dest)
        ):
            return CommandResult(
                "Destination must be a directory when moving multiple files\n"
            )
        return CommandResult(
            "".join(self._move_one(invocation, source, dest) for source in sources)
        )

"""
Command table and dispatch for the interactive shell.
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_explorer.use_cases.files.change_permissions import ChangePermissionsUseCase
from file_explorer.use_cases.files.copy_file import CopyFileUseCase
from file_explorer.use_cases.files.create_entries import (
    MakeDirectoryUseCase,
    TouchFileUseCase,
)
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.move_file import MoveFileUseCase
from file_explorer.use_cases.files.remove_path import RemovePathUseCase
from file_explorer.use_cases.files.search_files import SearchFilesUseCase
from file_explorer.use_cases.files.show_file import ShowFileUseCase

# (arguments, cwd) -> result
Handler = Callable[[list[str], str], CommandResult]


@dataclass(frozen=True)
class CommandSpec:
    name: str
    signature: str
    description: str
    handler: Handler
    min_args: int = 0
    usage: str = ""


class CommandDispatcher:
    """Map the first token of a command line to its handler."""

    def __init__(
        self,
        list_directory: ListDirectoryUseCase,
        change_directory: ChangeDirectoryUseCase,
        show_file: ShowFileUseCase,
        copy_file: CopyFileUseCase,
        move_file: MoveFileUseCase,
        remove_path: RemovePathUseCase,
        touch_file: TouchFileUseCase,
        make_directory: MakeDirectoryUseCase,
        search_files: SearchFilesUseCase,
        change_permissions: ChangePermissionsUseCase,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._list_directory = list_directory
        self._change_directory = change_directory
        self._show_file = show_file
        self._copy_file = copy_file
        self._move_file = move_file
        self._remove_path = remove_path
        self._touch_file = touch_file
        self._make_directory = make_directory
        self._search_files = search_files
        self._change_permissions = change_permissions
        self._logger = logger or logging.getLogger(__name__)

        specs = [
            CommandSpec("ls", "ls [path]", "list files (default cwd)", self._ls),
            CommandSpec("pwd", "pwd", "print current directory", self._pwd),
            CommandSpec(
                "cd",
                "cd <dir>",
                "change directory (relative or absolute)",
                self._cd,
                1,
                "cd needs a directory",
            ),
            CommandSpec(
                "cat",
                "cat <file>",
                "show file contents",
                self._cat,
                1,
                "cat needs a filename",
            ),
            CommandSpec(
                "cp", "cp <src> <dst>", "copy file", self._cp, 2, "Usage: cp src dst"
            ),
            CommandSpec(
                "mv",
                "mv <src> <dst>",
                "move/rename file",
                self._mv,
                2,
                "Usage: mv src dst",
            ),
            CommandSpec(
                "rm",
                "rm <path>",
                "remove file or directory (recursive for dir)",
                self._rm,
                1,
                "Usage: rm path",
            ),
            CommandSpec(
                "touch",
                "touch <file>",
                "create empty file",
                self._touch,
                1,
                "Usage: touch filename",
            ),
            CommandSpec(
                "mkdir",
                "mkdir <dir>",
                "create directory",
                self._mkdir,
                1,
                "Usage: mkdir dirname",
            ),
            CommandSpec(
                "search",
                "search <pattern> [start-path]",
                "recursive search for pattern in filenames",
                self._search,
                1,
                "Usage: search pattern [start-path]",
            ),
            CommandSpec(
                "chmod",
                "chmod <octal> <path>",
                "change permissions (e.g. 755)",
                self._chmod,
                2,
                "Usage: chmod octal path",
            ),
            CommandSpec("help", "help", "show this help", self._help),
            CommandSpec("exit", "exit", "quit", self._exit),
        ]
        self._commands: dict[str, CommandSpec] = {spec.name: spec for spec in specs}

    @property
    def commands(self) -> list[CommandSpec]:
        return list(self._commands.values())

    def dispatch(self, tokens: list[str], cwd: str) -> CommandResult:
        """
        Run the command named by the first token.

        Args:
            tokens: Non-empty token list from the parser
            cwd: Current working directory of the session

        Returns:
            CommandResult of the command; a new cwd is carried on the result
        """
        name, args = tokens[0], tokens[1:]
        spec = self._commands.get(name)
        if spec is None:
            self._logger.info(f"Unknown command: {name}")
            return CommandResult.usage(f"Unknown command: {name} (type help)")
        if len(args) < spec.min_args:
            return CommandResult.usage(spec.usage)

        self._logger.debug(f"Dispatching {name} with {args} in {cwd}")
        return spec.handler(args, cwd)

    def _ls(self, args: list[str], cwd: str) -> CommandResult:
        target = _resolve(cwd, args[0]) if args else cwd
        return self._list_directory.execute(target)

    def _pwd(self, args: list[str], cwd: str) -> CommandResult:
        return CommandResult.success(cwd)

    def _cd(self, args: list[str], cwd: str) -> CommandResult:
        return self._change_directory.execute(cwd, args[0])

    def _cat(self, args: list[str], cwd: str) -> CommandResult:
        return self._show_file.execute(_resolve(cwd, args[0]))

    def _cp(self, args: list[str], cwd: str) -> CommandResult:
        return self._copy_file.execute(_resolve(cwd, args[0]), _resolve(cwd, args[1]))

    def _mv(self, args: list[str], cwd: str) -> CommandResult:
        return self._move_file.execute(_resolve(cwd, args[0]), _resolve(cwd, args[1]))

    def _rm(self, args: list[str], cwd: str) -> CommandResult:
        return self._remove_path.execute(_resolve(cwd, args[0]))

    def _touch(self, args: list[str], cwd: str) -> CommandResult:
        return self._touch_file.execute(_resolve(cwd, args[0]))

    def _mkdir(self, args: list[str], cwd: str) -> CommandResult:
        return self._make_directory.execute(_resolve(cwd, args[0]))

    def _search(self, args: list[str], cwd: str) -> CommandResult:
        start = _resolve(cwd, args[1]) if len(args) > 1 else cwd
        return self._search_files.execute(start, args[0])

    def _chmod(self, args: list[str], cwd: str) -> CommandResult:
        return self._change_permissions.execute(args[0], _resolve(cwd, args[1]))

    def _help(self, args: list[str], cwd: str) -> CommandResult:
        rows = [(spec.signature, spec.description) for spec in self._commands.values()]
        return CommandResult(help_rows=rows)

    def _exit(self, args: list[str], cwd: str) -> CommandResult:
        return CommandResult(exit=True)


def _resolve(cwd: str, path: str) -> str:
    """Join a user-supplied path onto cwd; absolute paths replace cwd."""
    return os.path.join(cwd, path)

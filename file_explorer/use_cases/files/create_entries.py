"""
Use cases for creating files and directories.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


class TouchFileUseCase:
    """Use case for creating a file without truncating it."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> CommandResult:
        try:
            self._file_system.touch(path)
        except FileRepositoryError as e:
            self._logger.warning(f"Error touching {path}: {e}")
            return CommandResult.failure(f"Could not touch: {e}")
        return CommandResult.success(f"Touched {path}")


class MakeDirectoryUseCase:
    """Use case for creating a directory along with missing parents."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> CommandResult:
        if self._file_system.lexists(path):
            return CommandResult.precondition(
                f"Could not create: {path} already exists"
            )
        try:
            self._logger.info(f"Creating directory {path}")
            self._file_system.make_dirs(path)
        except FileRepositoryError as e:
            self._logger.warning(f"Error creating {path}: {e}")
            return CommandResult.failure(f"Could not create: {e}")
        return CommandResult.success(f"Created {path}")

"""
Use case for printing the contents of a regular file.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


class ShowFileUseCase:
    """Use case for displaying a file line by line."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> CommandResult:
        if not self._file_system.is_file(path):
            return CommandResult.precondition(
                f"File does not exist or not a regular file: {path}"
            )

        result = CommandResult.success()
        try:
            for line in self._file_system.read_lines(path):
                result.output.append(line)
        except FileRepositoryError as e:
            self._logger.warning(f"Error reading {path}: {e}")
            result.output.append(f"Read failed: {e}")
            return CommandResult.failure(*result.output)
        return result

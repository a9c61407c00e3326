"""
Use case for searching entry names recursively.
"""

import logging
import os
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


class SearchFilesUseCase:
    """Use case for finding entries whose name contains a substring."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, start: str, pattern: str) -> CommandResult:
        """
        Walk the tree below start and collect matching paths.

        Args:
            start: Absolute path to start from
            pattern: Case-sensitive substring matched against entry names

        Returns:
            CommandResult with one full path per match, in walk order
        """
        self._logger.info(
            f"Searching for entries containing '{pattern}' in directory: {start}"
        )
        if not self._file_system.exists(start):
            return CommandResult.precondition("Start path doesn't exist")

        result = CommandResult.success()
        try:
            for path in self._file_system.walk(start):
                if pattern in os.path.basename(path):
                    result.output.append(path)
        except FileRepositoryError as e:
            self._logger.warning(f"Search below {start} stopped: {e}")
            return CommandResult.failure(*result.output, f"Search stopped: {e}")

        self._logger.info(f"Found {len(result.output)} entries matching '{pattern}'")
        return result

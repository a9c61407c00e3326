"""
Use case for removing a file or a directory tree.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


class RemovePathUseCase:
    """Use case for deleting an entry, recursively for directories."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> CommandResult:
        """
        Remove path.

        A symlink is unlinked even when it points at a directory; the
        target is never touched.
        """
        if not self._file_system.lexists(path):
            return CommandResult.precondition("Path doesn't exist")

        result = CommandResult.success()
        try:
            if self._file_system.is_dir(path) and not self._file_system.is_link(path):
                result.output.append(f"Removing directory recursively: {path}")
                self._logger.info(f"Removing tree {path}")
                self._file_system.remove_tree(path)
            else:
                self._logger.info(f"Removing {path}")
                self._file_system.remove_file(path)
        except FileRepositoryError as e:
            self._logger.warning(f"Error removing {path}: {e}")
            return CommandResult.failure(*result.output, f"Remove failed: {e}")

        result.output.append("Removed")
        return result

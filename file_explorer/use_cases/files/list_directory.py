"""
Use case for listing the contents of a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.entities.directory_entry import DirectoryEntry
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


def format_row(permissions: str, size: str, kind: str, name: str) -> str:
    """Format one listing row: Permissions (12), Size (10), Type (12), Name."""
    return f"{permissions:<12}{size:<10}{kind:<12}{name}"


HEADER = format_row("Permissions", "Size", "Type", "Name")


class ListDirectoryUseCase:
    """Use case for listing the immediate children of a directory."""

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

    def execute(self, directory: str) -> CommandResult:
        """
        List a directory as a table of permissions, size, type and name.

        Args:
            directory: Absolute path of the directory to list

        Returns:
            CommandResult with the header and one row per entry
        """
        self._logger.info(f"Listing directory: {directory}")
        if not self._file_system.exists(directory):
            return CommandResult.precondition(f"Path does not exist: {directory}")
        if not self._file_system.is_dir(directory):
            return CommandResult.precondition(f"{directory} is not a directory")

        result = CommandResult.success(HEADER)
        try:
            for entry in self._file_system.list_entries(directory):
                result.output.append(self._row(entry))
        except FileRepositoryError as e:
            self._logger.warning(f"Error listing {directory}: {e}")

        self._logger.info(f"Listed {len(result.output) - 1} entries")
        return result

    @staticmethod
    def _row(entry: DirectoryEntry) -> str:
        return format_row(
            entry.permissions.to_symbolic(),
            str(entry.size),
            entry.kind.label,
            entry.name,
        )

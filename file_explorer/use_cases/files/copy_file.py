"""
Use case for copying a file.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort


class CopyFileUseCase:
    """Use case for copying a file over an existing or new destination."""

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

    def copy(self, src: str, dst: str) -> Optional[str]:
        """
        Copy src to dst, overwriting dst.

        Returns:
            None on success, otherwise the stderr diagnostic line
        """
        try:
            self._logger.info(f"Copying {src} to {dst}")
            self._file_system.copy_file(src, dst)
            return None
        except FileRepositoryError as e:
            self._logger.warning(f"Error copying {src}: {e}")
            return f"Copy failed: {e}"

    def execute(self, src: str, dst: str) -> CommandResult:
        """
        Copy a file, reporting failures on stderr.

        Args:
            src: Absolute source path
            dst: Absolute destination path

        Returns:
            CommandResult of the copy
        """
        diagnostic = self.copy(src, dst)
        if diagnostic is not None:
            return CommandResult.failure(errors=[diagnostic])
        return CommandResult.success(f"Copied {src} -> {dst}")

"""
Use case for moving or renaming a filesystem entry.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult, ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_system_port import FileSystemPort
from file_explorer.use_cases.files.copy_file import CopyFileUseCase


class MoveFileUseCase:
    """
    Use case for moving an entry.

    An atomic rename is tried first. When it fails (typically across
    devices) only regular files fall back to copy followed by deleting the
    source. If that last delete fails the move is still reported as done
    with a warning, and the source may be left duplicated.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        copier: CopyFileUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            copier: Copy use case used for the cross-device fallback
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._copier = copier
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, src: str, dst: str) -> CommandResult:
        """
        Move src to dst.

        Args:
            src: Absolute source path
            dst: Absolute destination path

        Returns:
            CommandResult of the move
        """
        if not self._file_system.lexists(src):
            return CommandResult.precondition("Path doesn't exist")

        try:
            self._logger.info(f"Renaming {src} to {dst}")
            self._file_system.rename(src, dst)
            return CommandResult.success("Moved")
        except FileRepositoryError as e:
            rename_error = e
            self._logger.info(f"Rename failed ({e}), trying fallback")

        if self._file_system.is_dir(src) and not self._file_system.is_link(src):
            return CommandResult.failure(
                "Move directory fallback not implemented.", "Move failed"
            )
        if self._file_system.is_link(src) or not self._file_system.is_file(src):
            return CommandResult.failure(f"Move failed: {rename_error}")

        diagnostic = self._copier.copy(src, dst)
        if diagnostic is not None:
            return CommandResult.failure("Move failed", errors=[diagnostic])

        try:
            self._file_system.remove_file(src)
        except FileRepositoryError as e:
            self._logger.warning(f"Source {src} left in place after copy: {e}")
            return CommandResult(
                kind=ErrorKind.WARNING,
                output=[f"Warning: removing source failed: {e}", "Moved"],
            )
        return CommandResult.success("Moved")

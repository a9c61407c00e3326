"""
Use case for replacing the permission bits of an entry.
"""

import logging
from typing import Optional

from file_explorer.entities.command_result import CommandResult
from file_explorer.entities.permission_set import PermissionSet
from file_explorer.exceptions import FileRepositoryError, InvalidModeError
from file_explorer.ports.files.file_system_port import FileSystemPort

INVALID_MODE = "Invalid mode. Provide octal like 755 or 0755"


class ChangePermissionsUseCase:
    """Use case for chmod with an octal mode string."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, mode: str, path: str) -> CommandResult:
        """
        Apply an octal mode to path.

        The mode is parsed before anything on disk is looked at.
        """
        try:
            permissions = PermissionSet.from_octal(mode)
        except InvalidModeError:
            return CommandResult.usage(INVALID_MODE)

        if not self._file_system.exists(path):
            return CommandResult.precondition("Path doesn't exist")

        try:
            self._logger.info(f"Setting {path} to {permissions.to_symbolic()}")
            self._file_system.set_permissions(path, permissions)
        except FileRepositoryError as e:
            self._logger.warning(f"Error changing permissions of {path}: {e}")
            return CommandResult.failure(f"chmod failed: {e}")
        return CommandResult.success("Permissions updated")
